"""Rules, constants and theme pool for Value Talk."""

from enum import Enum


class Phase(str, Enum):
    """Game phase. A misplay costs a life but play continues until lives run out."""

    PLAYING = "playing"
    GAMEOVER = "gameover"


class Difficulty(str, Enum):
    """Which theme pool new themes are drawn from."""

    EASY = "EASY"
    NORMAL = "NORMAL"
    HARD = "HARD"
    MIXED = "MIXED"
    GRADUAL = "GRADUAL"


CARD_MIN = 1
CARD_MAX = 100
INITIAL_LIFE = 3
MIN_PLAYERS = 1

# GRADUAL: levels up to EASY_UNTIL use EASY themes, up to NORMAL_UNTIL use NORMAL, then HARD.
GRADUAL_EASY_UNTIL = 2
GRADUAL_NORMAL_UNTIL = 5

# Themes are scales that map naturally onto 1 (least) .. 100 (most).
THEME_SETS: dict[Difficulty, tuple[str, ...]] = {
    Difficulty.EASY: (
        "Size of animals",
        "Running speed of animals",
        "Weight of things in your bag",
        "Price of things at a convenience store",
        "Height of famous buildings",
        "Lifespan of living things",
        "Calories in foods",
        "Hardness of foods",
        "Spiciness of foods",
        "Sweetness of foods",
        "Sourness of foods",
        "Popularity of kids' snacks",
        "Luxury of sushi toppings",
        "Speed of vehicles",
        "Price of home appliances",
        "Strength of insects",
        "Size of places, from a room to a country",
        "Length of time, from an instant to forever",
        "Temperature of hot things",
        "Loudness of sounds",
        "Smelliness of things",
        "Fame of celebrities",
        "Size of furniture at home",
        "Size of balls used in sports",
        "Population of countries and cities",
        "Age of historical events",
        "Box office success of movies",
        "Thickness of books in a bookstore",
        "Shelf life of things in the fridge",
        "Bath temperature, from ice water to scalding",
        "Loudness of a voice, from a whisper to a scream",
        "Brightness of a room, from pitch dark to direct sunlight",
        "Size of dogs",
        "Size of paper, from a stamp to a poster",
        "Length of a wait in a shop queue",
        "Distance of a trip",
        "Happiness at a test score",
        "Amount of monthly pocket money",
    ),
    Difficulty.NORMAL: (
        "Things to bring to a desert island (importance)",
        "Weapons you would trust against zombies",
        "Things in the fridge that would cheer you up",
        "Places for a first date (appeal)",
        "Presents you would not want (annoyance)",
        "Things that would be scary to find at home",
        "Plain but useful stationery",
        "Dream jobs",
        "Hobbies that feel rich",
        "Words that would hurt to hear",
        "Compliments that would make you happy",
        "Things you must try once in a lifetime (scale)",
        "Last meal before the end of the world",
        "Magic powers (usefulness)",
        "RPG classes you would pick",
        "Bad manners you cannot forgive",
        "Amusement park rides (scariness)",
        "Late-night snacks (guilt and taste)",
        "School clubs that make you popular",
        "Jobs that pay the most",
        "Tools for surviving in the wild",
        "Animals you would be reborn as",
        "Things that make you feel safe in your bag",
        "Hotpot ingredients",
        "How fulfilling a day off was",
        "Money you could lend a friend and not get back",
        "How late a friend can be before you get angry",
        "Drinks you would love in a vending machine",
        "Food stall treats",
        "Phone battery level (anxiety)",
        "Wi-Fi speed, from stressful to smooth",
        "Messiness of a room (tolerance)",
        "Sleepiness",
        "Hunger",
        "Scariness of roller coasters",
    ),
    Difficulty.HARD: (
        "Things that matter in life (priority)",
        "What it takes to become an adult",
        "Things you want to survive 100 years into the future",
        "Names of special moves (how strong they sound)",
        "People who could be a movie hero",
        "Charisma as a villain",
        "Depth of love shown by an action",
        "Actions you consider just",
        "Moments you feel free",
        "Moments you feel happy",
        "The line between a friend and a best friend",
        "Value of things money cannot buy",
        "Talent versus effort, from effort to talent",
        "Lies, from kind to cruel",
        "Balance of risk and reward",
        "Qualities of a leader",
        "Sense of humour, from cringe to hilarious",
        "Value of youth versus experience",
        "Analog versus digital, from convenient to warm",
        "City life versus country life",
        "Stability versus challenge",
    ),
}

ALL_THEMES: tuple[str, ...] = (
    THEME_SETS[Difficulty.EASY] + THEME_SETS[Difficulty.NORMAL] + THEME_SETS[Difficulty.HARD]
)
