import pytest

from katas.raindrops import raindrops


@pytest.mark.parametrize(
    ("number", "expected"),
    [
        (1, "1"),
        (3, "Pling"),
        (5, "Plang"),
        (7, "Plong"),
        (6, "Pling"),
        (8, "8"),
        (9, "Pling"),
        (10, "Plang"),
        (14, "Plong"),
        (15, "PlingPlang"),
        (21, "PlingPlong"),
        (25, "Plang"),
        (27, "Pling"),
        (35, "PlangPlong"),
        (49, "Plong"),
        (52, "52"),
        (105, "PlingPlangPlong"),
        (3125, "Plang"),
    ],
)
def test_raindrops(number, expected):
    assert raindrops(number) == expected