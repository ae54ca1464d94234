MIN_QUALITY = 0
MAX_QUALITY = 5
PASSING_QUALITY = 3

INITIAL_EASINESS_FACTOR = 2.5
MIN_EASINESS_FACTOR = 1.3

FIRST_INTERVAL_DAYS = 1    # first successful review
SECOND_INTERVAL_DAYS = 6   # second successful review
LAPSE_INTERVAL_DAYS = 1    # review again tomorrow

MS_PER_DAY = 24 * 60 * 60 * 1000
