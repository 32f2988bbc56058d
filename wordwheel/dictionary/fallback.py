"""Compiled-in word tables used when no word-list file can be loaded."""

from typing import Tuple

DEFAULT_BASE_WORD = "SPRING"

FALLBACK_BASE_WORDS: Tuple[str, ...] = (
    "SPRING", "TRAINS", "PLANTS", "STRAND", "SEARCH", "DREAMS", "MASTER", "GRAINS",
)

FALLBACK_WORDS: Tuple[str, ...] = (
    # 6 letters
    "SPRING", "GRAINS", "PLANTS", "STRAND", "SEARCH", "REMAIN",
    "TRAINS", "STRAIN", "ARCHES", "MASTER", "STREAM", "WINTER",
    "DREAMS",

    # 5 letters
    "GRAIN", "TRAIN", "STAIN", "RINGS", "BRING", "STING",
    "PRINT", "GRAND", "PLANT", "MARCH", "REACH", "STEAM",
    "TEAMS", "MATES", "RATES", "STARE", "TEARS", "SMART",
    "GRINS", "GRIPS", "SPINS", "SNIPS", "SIGNS", "RAINS",
    "SATIN", "STAIR", "SAINT", "SLANT", "STAND", "CHASE",
    "CARES", "SCARE", "RACES", "ACRES", "SHARE", "DREAM",
    "SMEAR", "MARES",

    # 4 letters
    "RING", "SING", "PING", "RAIN", "GAIN", "ARCH",
    "PAIN", "MAIN", "STAR", "RANG", "HANG", "BANG",
    "ARCS", "CARS", "MARS", "TEAM", "SEAM", "REAM",
    "MAST", "CAST", "EAST", "SEAR", "TEAR", "STEM",
    "TERM", "GRIN", "GRIP", "PIGS", "PINS", "RIGS",
    "RIPS", "SIGN", "SNIP", "SPIN", "NIPS", "PRIG",
    "ANTS", "ARTS", "RANT", "RATS", "TINS", "PANT",
    "SLAP", "SPAT", "PAST", "SNAP", "SPAN", "SAND",
    "DART", "CARE", "RACE", "ACRE", "HARE", "HEAR",
    "CASH", "RASH", "EACH", "ACHE", "MADE", "MARE",
    "READ", "DEAR", "MEAT", "MATE", "TAME", "RATE",
    "REST", "SEAT",

    # 3 letters
    "SIN", "TIN", "PIN", "RIG", "RAG", "GIN",
    "TAG", "SAG", "NAG", "GAP", "SAP", "TAP",
    "ARC", "CAR", "MAR", "EAR", "TEA", "SEA",
    "SET", "MET", "MAT", "SAT", "RAT", "EAT",
    "PIG", "RIP", "SIP", "NIP", "ANT", "ART",
    "ARM", "RAM", "ERA", "ATE", "TAR", "ARE",
)
