"""
Default batches for the suggestion flows.

These hand-authored batches are served whenever the model path fails at any
stage (not configured, upstream error, unparseable text, wrong shape). They
are pure: the topic is substituted into titles, descriptions and search URLs,
every numeric field is a literal.
"""

from typing import List
from urllib.parse import quote

from backend.agents.recommendation.types import CourseRecord, HobbyIdea, TrendingHobby


def _url_component(text: str) -> str:
    """Percent-encode text for use inside a URL path or query value."""
    return quote(text, safe="!*'()")


def default_hobby_ideas(hobby: str) -> List[HobbyIdea]:
    """Ten generic ways to monetize ``hobby``."""
    return [
        {
            "method": "Content Creation",
            "description": f"Start a social media presence showcasing your {hobby} skills and build an audience.",
            "tools": "Instagram, TikTok, YouTube",
            "earnings": "₹8,000-₹1,60,000/month",
            "icon": "📱",
        },
        {
            "method": "Online Courses",
            "description": f"Teach others your {hobby} through structured online courses.",
            "tools": "Udemy, Skillshare, Teachable",
            "earnings": "₹16,000-₹2,40,000/month",
            "icon": "🎓",
        },
        {
            "method": "Freelance Services",
            "description": f"Offer your {hobby} skills as services to clients.",
            "tools": "Fiverr, Upwork, Facebook",
            "earnings": "₹2,000-₹16,000/hour",
            "icon": "💼",
        },
        {
            "method": "Local Workshops",
            "description": f"Host in-person {hobby} workshops in your community.",
            "tools": "Community centers, Eventbrite",
            "earnings": "₹4,000-₹24,000/workshop",
            "icon": "🏫",
        },
        {
            "method": "Digital Products",
            "description": f"Create and sell templates, guides, or tools related to {hobby}.",
            "tools": "Etsy, Gumroad, own website",
            "earnings": "₹24,000-₹2,40,000/month",
            "icon": "💾",
        },
        {
            "method": "Affiliate Marketing",
            "description": f"Review {hobby} products and earn commissions through affiliate links.",
            "tools": "Blog, YouTube, Amazon Associates",
            "earnings": "₹16,000-₹1,60,000/month",
            "icon": "⭐",
        },
        {
            "method": "Coaching & Consulting",
            "description": f"Offer one-on-one coaching sessions to help others advance in {hobby}.",
            "tools": "Zoom, Calendly, social media",
            "earnings": "₹4,000-₹24,000/hour",
            "icon": "🎯",
        },
        {
            "method": "Custom Products",
            "description": f"Design and sell custom {hobby}-related products using print-on-demand.",
            "tools": "Printful, Teespring, Etsy",
            "earnings": "₹24,000-₹2,00,000/month",
            "icon": "🛍️",
        },
        {
            "method": "Subscription Service",
            "description": f"Create monthly boxes or content subscriptions for {hobby} enthusiasts.",
            "tools": "Cratejoy, Shopify, social media",
            "earnings": "₹80,000-₹8,00,000/month",
            "icon": "📦",
        },
        {
            "method": "Event Hosting",
            "description": f"Organize {hobby}-themed events, meetups, or experiences.",
            "tools": "Eventbrite, Meetup, social media",
            "earnings": "₹16,000-₹1,60,000/event",
            "icon": "🎉",
        },
    ]


def default_course_recommendations(hobby: str) -> List[CourseRecord]:
    """Three generic courses for ``hobby`` pointing at platform search pages."""
    encoded = _url_component(hobby)
    return [
        {
            "title": f"Complete {hobby} Masterclass",
            "hobby": hobby,
            "provider": "Udemy",
            "duration": "8 weeks",
            "rating": 4.7,
            "students": 12500,
            "price": "₹3,999",
            "level": "Beginner to Advanced",
            "description": f"Master {hobby} from basics to advanced techniques with hands-on projects.",
            "url": f"https://www.udemy.com/courses/search/?q={encoded}",
        },
        {
            "title": f"{hobby} Fundamentals",
            "hobby": hobby,
            "provider": "Coursera",
            "duration": "6 weeks",
            "rating": 4.6,
            "students": 8900,
            "price": "₹3,199",
            "level": "Beginner",
            "description": f"Learn the essential foundations of {hobby} with expert instructors.",
            "url": f"https://www.coursera.org/courses?query={encoded}",
        },
        {
            "title": f"Advanced {hobby} Techniques",
            "hobby": hobby,
            "provider": "Skillshare",
            "duration": "10 weeks",
            "rating": 4.8,
            "students": 15600,
            "price": "₹4,799",
            "level": "Advanced",
            "description": f"Take your {hobby} skills to the next level with advanced strategies.",
            "url": f"https://www.skillshare.com/browse/{encoded}",
        },
    ]


def default_trending_hobbies() -> List[TrendingHobby]:
    """Six evergreen trending hobbies (not topic dependent)."""
    return [
        {
            "title": "Content Creation & Social Media",
            "description": "Create engaging content on platforms like Instagram, YouTube, and TikTok. Monetize through brand partnerships, ads, and sponsorships.",
            "category": "Digital",
            "incomeRange": "₹20,000-₹5,00,000/month",
            "trend": "hot",
            "icon": "📱",
        },
        {
            "title": "Digital Art & NFTs",
            "description": "Create and sell digital artwork, illustrations, and NFTs. High demand for unique digital assets and custom commissions.",
            "category": "Creative",
            "incomeRange": "₹30,000-₹3,00,000/month",
            "trend": "rising",
            "icon": "🎨",
        },
        {
            "title": "Fitness Coaching",
            "description": "Online personal training, yoga instruction, or fitness consulting. Growing health consciousness drives demand.",
            "category": "Lifestyle",
            "incomeRange": "₹25,000-₹2,00,000/month",
            "trend": "hot",
            "icon": "💪",
        },
        {
            "title": "Tech Tutorial & Coding",
            "description": "Teach programming, web development, or tech skills through courses and tutorials. Ever-growing demand for tech education.",
            "category": "Tech",
            "incomeRange": "₹40,000-₹4,00,000/month",
            "trend": "stable",
            "icon": "💻",
        },
        {
            "title": "Sustainable Crafts",
            "description": "Create eco-friendly products like upcycled fashion, sustainable home decor. Rising environmental awareness fuels demand.",
            "category": "Crafts",
            "incomeRange": "₹15,000-₹1,50,000/month",
            "trend": "rising",
            "icon": "♻️",
        },
        {
            "title": "Gaming & Streaming",
            "description": "Stream gameplay, create gaming content, compete in esports. Massive and growing gaming industry with multiple revenue streams.",
            "category": "Entertainment",
            "incomeRange": "₹25,000-₹10,00,000/month",
            "trend": "hot",
            "icon": "🎮",
        },
    ]
