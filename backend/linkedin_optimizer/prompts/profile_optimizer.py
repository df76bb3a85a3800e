"""
Profile Optimizer Prompt — asks for four labelled suggestion sections.

Used by optimizer_service.py → llm_service.complete()
Reply is plain text, parsed by response_parser.py (not JSON mode).
"""

USER_PROMPT_TEMPLATE = """\
You are a professional LinkedIn profile optimizer. Analyze this LinkedIn profile data and provide optimization suggestions in a structured format:

Profile Data:
Headline: {headline}
Summary: {summary}
Experience: {experience}
Skills: {skills}

Please provide your suggestions in exactly this format (do not add any additional text or explanations):

HEADLINE:
[Your optimized headline suggestion]

KEYWORDS:
- [Keyword 1]
- [Keyword 2]
- [Keyword 3]

EXPERIENCE:
- [Improved experience point 1]
- [Improved experience point 2]
- [Improved experience point 3]

SUMMARY:
[Your optimized summary suggestion]"""
