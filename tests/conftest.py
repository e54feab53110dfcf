import math

import pytest

from glovehand.detectors.glove.vision_backend import VisionBackend, ConvexityDefect

COG = (320, 240)
TIP_RADIUS = 100
FOLD_RADIUS = 15

# Hand-relative tip angles in hull order: thumb, index, then the other three
HAND_ANGLES = [150, 75, 0, 300, 225]


def polar_point(centre, radius, degrees):
    """Point at an angle around centre, with y running up the screen"""
    rad = math.radians(degrees)
    return (int(round(centre[0] + radius * math.cos(rad))),
            int(round(centre[1] - radius * math.sin(rad))))


def hand_defects(angles=HAND_ANGLES, depth=25.0, scale=1):
    """
    Synthetic defects for an upright hand centred on COG

    Tips sit TIP_RADIUS from the COG, folds close to it, so every tip has a
    narrow fold angle. Coordinates are divided by scale to mimic the
    working image.
    """
    defects = []
    for a in angles:
        tip = polar_point(COG, TIP_RADIUS, a)
        fold = polar_point(COG, FOLD_RADIUS, a - 30)
        defects.append(ConvexityDefect(
            (tip[0] / scale, tip[1] / scale),
            (fold[0] / scale, fold[1] / scale),
            depth / scale,
        ))
    return defects


def upright_moments(cog=COG, scale=1, m00=1.0):
    """Moments of a contour centred on cog whose axis resolves to 90 degrees"""
    return {
        'm00': m00,
        'm10': cog[0] / scale * m00,
        'm01': cog[1] / scale * m00,
        # diff < 0 with a tiny positive mu11 gives a tilt of 90
        'mu11': 0.001,
        'mu20': 100.0,
        'mu02': 1100.0,
    }


class FakeBackend(VisionBackend):
    """Hands out fixed moments and defects, the mask doubles as the contour"""

    def __init__(self, moments=None, defects=None):
        self.moments = moments if moments is not None else upright_moments()
        self.defects = list(defects) if defects is not None else hand_defects()
        self.calls = []

    def find_largest_contour(self, mask, min_area):
        self.calls.append('find_largest_contour')
        return mask

    def compute_moments(self, contour):
        self.calls.append('compute_moments')
        return self.moments

    def simplify_contour(self, contour, epsilon):
        self.calls.append('simplify_contour')
        return contour

    def convex_hull(self, contour):
        self.calls.append('convex_hull')
        return contour

    def convexity_defects(self, contour, hull):
        self.calls.append('convexity_defects')
        return list(self.defects)


@pytest.fixture
def fake_backend():
    return FakeBackend()


@pytest.fixture
def contour():
    # Any non-None object stands in for a contour with FakeBackend
    return object()
