"""
State carried between frames by the hand analyzer
"""
import copy
from dataclasses import dataclass, field


@dataclass
class HandState:
    """
    Latest analysis of the hand

    cog and finger_tips are in original-frame pixels. named_fingers holds one
    FingerName per entry of finger_tips, in the same order. cog is None until
    a contour with non-zero area has been seen.
    """
    cog: tuple = None
    axis_angle: int = 0
    finger_tips: list = field(default_factory=list)
    named_fingers: list = field(default_factory=list)

    @property
    def finger_count(self):
        return len(self.finger_tips)

    def named_pairs(self):
        """(FingerName, (x, y)) pairs in tip order"""
        return list(zip(self.named_fingers, self.finger_tips))

    def copy(self):
        return copy.deepcopy(self)

    def normalized_cog(self, width, height):
        """COG as 0..1 fractions of the frame, the centre when no COG is known"""
        if self.cog is None:
            return 0.5, 0.5
        return self.cog[0] / width, self.cog[1] / height
