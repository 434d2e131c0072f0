"""Random RADIUS credentials

Usernames and passwords are drawn from an alphabet without look-alike
characters (I, l, 1, O, 0) so they can be read over the phone.
Uniqueness is not checked here; the username column's unique constraint is
the guard.
"""

import random

SAFE_CHARS = "abcdefghijkmnopqrstuvwxyzABCDEFGHJKLMNPQRSTUVWXYZ23456789"
USERNAME_PREFIX = "usr_"


def generate_random_string(length: int = 10) -> str:
    return "".join(random.choice(SAFE_CHARS) for _ in range(max(length, 0)))


def generate_username() -> str:
    return USERNAME_PREFIX + generate_random_string(10)


def generate_password() -> str:
    return generate_random_string(10)
