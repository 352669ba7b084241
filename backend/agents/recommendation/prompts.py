"""
Recommendation Prompt Templates

Contains the system instructions and user prompt builders for the three
AI suggestion flows:

- Hobby ideas: 10 ways to make money from a hobby
- Course recommendations: 6 FREE learning resources for a hobby
- Trending hobbies: top 6 hobbies with income potential right now

Prompt Engineering Pattern:
- System instruction defines ROLE only and insists on JSON arrays
- User prompt enumerates every field with content guidance
- Every prompt ends with "Return ONLY a JSON array". The service layer does
  NOT rely on the model obeying it (see recommendation_pipeline.py).
"""

from typing import Optional

# =============================================================================
# SYSTEM INSTRUCTIONS
# =============================================================================

HOBBY_IDEAS_SYSTEM_PROMPT = (
    "You are a creative business advisor. "
    "Always return valid JSON arrays as requested."
)

COURSE_RECOMMENDATIONS_SYSTEM_PROMPT = (
    "You are an expert educational advisor. "
    "Always return valid JSON arrays as requested."
)

TRENDING_HOBBIES_SYSTEM_PROMPT = (
    "You are a market trends analyst. "
    "Always return valid JSON arrays as requested."
)

# Batch sizes requested from the model
HOBBY_IDEAS_COUNT = 10
COURSE_RECOMMENDATIONS_COUNT = 6
TRENDING_HOBBIES_COUNT = 6


# =============================================================================
# USER PROMPT BUILDERS
# =============================================================================

def build_hobby_ideas_prompt(hobby: str) -> str:
    """
    Build the user prompt for hobby monetization ideas.

    Args:
        hobby: The user's hobby (already trimmed by the caller)

    Returns:
        Prompt requesting a JSON array of HOBBY_IDEAS_COUNT idea records
    """
    return f"""You are a creative business advisor specialized in monetizing hobbies. Generate {HOBBY_IDEAS_COUNT} diverse, realistic money-making ideas for the hobby: "{hobby}".

Include both traditional and modern/trending approaches. Make them actionable and beginner-friendly.

<fields>
For each idea, provide:
1. A catchy method name
2. Clear description (2-3 sentences)
3. Specific tools/platforms
4. Realistic earning potential in INR (Indian Rupees), formatted as a range like "₹8,000-₹40,000/month"
5. An appropriate emoji
6. A relevant source URL (learning resource, platform, or tutorial)
</fields>

Return ONLY a JSON array with this exact structure:
[
  {{
    "method": "Method Name",
    "description": "Clear description of the opportunity",
    "tools": "Specific platforms or tools",
    "earnings": "₹X,XXX-₹X,XXX/month",
    "icon": "🎯",
    "source": "https://example.com/relevant-guide"
  }}
]"""


def build_course_recommendations_prompt(hobby: str) -> str:
    """
    Build the user prompt for FREE course recommendations.

    The hobby is echoed into each record's "hobby" field so cards can be
    badged even when the model forgets to fill it.
    """
    return f"""You are an expert educational advisor specializing in online learning and skill development.
Generate personalized FREE course recommendations for someone interested in: {hobby}.

IMPORTANT: Focus on FREE learning resources, especially YouTube channels, playlists, and free online courses.

Return EXACTLY {COURSE_RECOMMENDATIONS_COUNT} high-quality, diverse FREE course/resource recommendations in valid JSON format.
Each course should be realistic and tailored to different skill levels.

<sources>
For each recommendation, provide:
- YouTube channel or playlist URL (if available)
- Free course platform links (Coursera free courses, edX, Khan Academy, freeCodeCamp, etc.)
- Quality free tutorials
</sources>

<field_guidance>
- "rating": a decimal between 4.5 and 5.0
- "students": a whole number between 1000 and 50000
- "price": always "Free"
- "level": one of Beginner, Intermediate, Advanced, All Levels
</field_guidance>

Return ONLY a JSON array with this structure:
[
  {{
    "title": "Course/Resource title",
    "hobby": "{hobby}",
    "provider": "YouTube / Coursera (Free) / edX / Khan Academy / etc.",
    "duration": "Time to complete (e.g., 8 weeks, 12 hours)",
    "rating": 4.8,
    "students": 12000,
    "price": "Free",
    "level": "Beginner/Intermediate/Advanced/All Levels",
    "description": "Compelling 1-2 sentence description",
    "url": "Direct YouTube or course URL"
  }}
]"""


def build_trending_hobbies_prompt(interest: Optional[str] = None) -> str:
    """
    Build the user prompt for currently trending hobbies.

    Args:
        interest: Optional area to narrow the list (e.g. "outdoors").
                  Blank or None means "any hobby".
    """
    focus_line = ""
    if interest:
        focus_line = f"\nPrefer hobbies related to: {interest}\n"

    return f"""You are a market trends analyst specializing in hobby monetization and side hustles.

Generate a list of the TOP {TRENDING_HOBBIES_COUNT} CURRENTLY TRENDING hobbies that have strong income potential.
{focus_line}
<focus>
- Emerging trends and popular interests
- Hobbies with proven monetization opportunities
- Realistic income ranges in INR (Indian Rupees)
- Current market demand
</focus>

Return ONLY a JSON array with this exact structure:
[
  {{
    "title": "Hobby name",
    "description": "Brief description of why it's trending and its income potential (2-3 sentences)",
    "category": "Category (e.g., Creative, Tech, Lifestyle, etc.)",
    "incomeRange": "₹X,XXX-₹X,XX,XXX/month",
    "trend": "rising/hot/stable",
    "icon": "🎯"
  }}
]

Make sure all hobbies are currently relevant and have real market demand."""
