from __future__ import annotations

JOKE_PROMPT = "tell me a terrible dad joke"

# Google Cloud project the generation call is scoped to.
PROJECT_ID = "eyalbenivri-playground"
