import os

from hypothesis import settings

settings.register_profile(
    "ci",
    settings(max_examples=200, deadline=None, derandomize=True),
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "default"))
