"""Prompt templates for LLM-backed text analysis.

Each template uses ``{placeholder}`` syntax for variable substitution via
``str.format()``. Every prompt asks for a bare JSON object so responses can
be parsed without guessing.
"""

# ---------------------------------------------------------------------------
# Content safety
# ---------------------------------------------------------------------------

CONTENT_SAFETY_PROMPT = """\
You are a content safety classifier for a public customer feedback board.

Rate the feedback below in each harm category on an integer severity scale:
0 = safe, 2 = low, 4 = medium, 6 = high.

Categories:
- "Hate": insults, slurs, or attacks on people or groups
- "SelfHarm": references to hurting or killing oneself
- "Sexual": sexual or sexually explicit content
- "Violence": threats or descriptions of physical harm

Return ONLY a JSON object mapping each category name to its severity, e.g.
{{"Hate": 0, "SelfHarm": 0, "Sexual": 0, "Violence": 2}}

Feedback:
{text}
"""

# ---------------------------------------------------------------------------
# Sentiment
# ---------------------------------------------------------------------------

SENTIMENT_PROMPT = """\
You are a sentiment analyst. Classify the overall sentiment of the feedback \
below as "Positive", "Negative" or "Neutral" and give your confidence in that \
label as a number between 0.0 and 1.0.

Return ONLY a JSON object: {{"category": "<label>", "score": <confidence>}}

Feedback:
{text}
"""

# ---------------------------------------------------------------------------
# Key phrases
# ---------------------------------------------------------------------------

KEY_PHRASES_PROMPT = """\
Extract up to {max_phrases} key phrases from the feedback below. Key phrases \
are short noun phrases (1-4 words) that capture the main talking points. \
Order them from most to least relevant and keep the original wording.

Return ONLY a JSON object: {{"key_phrases": ["...", "..."]}}

Feedback:
{text}
"""

# ---------------------------------------------------------------------------
# Language detection
# ---------------------------------------------------------------------------

LANGUAGE_PROMPT = """\
Identify the language the feedback below is written in. Use the English name \
of the language (for example "English", "Polish", "German").

Return ONLY a JSON object: {{"language": "<name>"}}

Feedback:
{text}
"""
