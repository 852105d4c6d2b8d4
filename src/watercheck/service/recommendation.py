# SPDX-License-Identifier: MIT

from typing import Literal, TypedDict

from watercheck.service.water_entry import validate_positive_quantity

BmiCategory = Literal["Underweight", "Normal weight", "Overweight", "Obesity"]

# Milliliters of water per kilogram of body weight per day
WATER_ML_PER_KG = 35


class Recommendation(TypedDict):
    bmi: float
    category: BmiCategory
    recommended_intake: float


def get_bmi(weight_kg: float, height_cm: float) -> float:
    height_m = height_cm / 100.0
    return weight_kg / (height_m * height_m)


def get_bmi_category(bmi: float) -> BmiCategory:
    if bmi < 18.5:
        return "Underweight"
    elif bmi < 25:
        return "Normal weight"
    elif bmi < 30:
        return "Overweight"
    return "Obesity"


def get_recommendation(weight_kg: float, height_cm: float) -> Recommendation:
    weight_kg = validate_positive_quantity("weight", weight_kg)
    height_cm = validate_positive_quantity("height", height_cm)

    bmi = get_bmi(weight_kg, height_cm)
    return {
        "bmi": bmi,
        "category": get_bmi_category(bmi),
        "recommended_intake": weight_kg * WATER_ML_PER_KG,
    }
