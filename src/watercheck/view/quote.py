# SPDX-License-Identifier: MIT

import random

WATER_QUOTES = [
    "Water is life's matter and matrix. (Albert Szent-Gyorgyi)",
    "Thousands have lived without love, not one without water. (W. H. Auden)",
    "Drink more water. Your skin, your hair, your mind, and your body will thank you.",
    "Pure water is the world's first and foremost medicine. (Slovak Proverb)",
    "When you drink water, remember the spring. (Chinese Proverb)",
    "Hydrate to feel great!",
    "You're not sick, you're thirsty. (F. Batmanghelidj)",
    "A glass of water a day keeps fatigue away.",
    "Stay hydrated, stay healthy!",
]


def get_random_quote() -> str:
    return random.choice(WATER_QUOTES)
