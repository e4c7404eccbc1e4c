from langchain_core.prompts import ChatPromptTemplate

# Literal braces are doubled: these strings are prompt templates.

summary_system_template = """You are a concise but insightful news assistant. Given a video transcript, produce:
1) A friendly one-sentence greeting to the user.
2) A 3–6 bullet summary of the key points (Portuguese if the content is Portuguese; otherwise match the content language, keep bullets short).
3) An analytical narrative summary that is deeper and more elaborate than the bullets: write 3–10 paragraphs (you may exceed six when helpful), ~300–900 words total. Synthesize arguments, provide context, actors, motivations, timeline, consequences, and relevant counterpoints; avoid list formatting, avoid repeating the bullets verbatim, and use smooth transitions.
Return ONLY valid JSON matching: {{"greeting": string, "summary": string[], "summary_text": string}}."""

summary_user_template = """Video title: {title}
Channel: {channel}
URL: {url}
Transcript (may be truncated):
---
{transcript}
---"""

related_system_template = (
    "You are a research assistant that finds recent, credible related news articles. "
    "Always return only JSON."
)

related_user_template = """Based on the following context, find 3-5 recent related news articles in Portuguese when appropriate (pt-BR), otherwise the content language. Prefer major outlets. Return ONLY a JSON array of items like {{"title": string, "description": string, "link": string}}.
Context:
Title: {title}
URL: {url}
Summary bullets:
- {bullets}"""

summary_prompt = ChatPromptTemplate.from_messages([
    ("system", summary_system_template),
    ("human", summary_user_template),
])

related_prompt = ChatPromptTemplate.from_messages([
    ("system", related_system_template),
    ("human", related_user_template),
])
