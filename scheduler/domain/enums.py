from enum import IntEnum

from ..config import PASSING_QUALITY


class Quality(IntEnum):
    BLACKOUT = 0
    INCORRECT = 1
    INCORRECT_FAMILIAR = 2
    CORRECT_DIFFICULT = 3
    CORRECT_HESITANT = 4
    PERFECT = 5

    @property
    def is_passing(self) -> bool:
        return self >= PASSING_QUALITY


QUALITY_LABELS = {
    Quality.BLACKOUT: "complete blackout",
    Quality.INCORRECT: "incorrect, remembered on seeing the answer",
    Quality.INCORRECT_FAMILIAR: "incorrect, answer seemed easy to recall",
    Quality.CORRECT_DIFFICULT: "correct with serious difficulty",
    Quality.CORRECT_HESITANT: "correct after hesitation",
    Quality.PERFECT: "perfect response",
}
