import pytest

from katas.allergies import Allergen, Allergies

A = Allergen


@pytest.mark.parametrize(
    ("allergen", "allergic_only", "with_other", "without"),
    [
        (A.EGGS, 1, 3, 2),
        (A.PEANUTS, 2, 7, 5),
        (A.SHELLFISH, 4, 14, 10),
        (A.STRAWBERRIES, 8, 28, 20),
        (A.TOMATOES, 16, 56, 40),
        (A.CHOCOLATE, 32, 112, 80),
        (A.POLLEN, 64, 224, 160),
        (A.CATS, 128, 192, 64),
    ],
)
def test_is_allergic_to(allergen, allergic_only, with_other, without):
    assert Allergies(0).is_allergic_to(allergen) is False
    assert Allergies(allergic_only).is_allergic_to(allergen) is True
    assert Allergies(with_other).is_allergic_to(allergen) is True
    assert Allergies(without).is_allergic_to(allergen) is False
    assert Allergies(255).is_allergic_to(allergen) is True


@pytest.mark.parametrize(
    ("score", "expected"),
    [
        (0, []),
        (1, [A.EGGS]),
        (2, [A.PEANUTS]),
        (8, [A.STRAWBERRIES]),
        (3, [A.EGGS, A.PEANUTS]),
        (5, [A.EGGS, A.SHELLFISH]),
        (248, [A.STRAWBERRIES, A.TOMATOES, A.CHOCOLATE, A.POLLEN, A.CATS]),
        (
            255,
            [
                A.EGGS,
                A.PEANUTS,
                A.SHELLFISH,
                A.STRAWBERRIES,
                A.TOMATOES,
                A.CHOCOLATE,
                A.POLLEN,
                A.CATS,
            ],
        ),
        (
            509,
            [
                A.EGGS,
                A.SHELLFISH,
                A.STRAWBERRIES,
                A.TOMATOES,
                A.CHOCOLATE,
                A.POLLEN,
                A.CATS,
            ],
        ),
        (257, [A.EGGS]),
    ],
)
def test_allergies(score, expected):
    assert Allergies(score).allergies() == expected