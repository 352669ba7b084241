"""
Shared constants for the opportunity board and AI suggestion fallbacks.

Filter sentinels and budget bounds mirror the options offered by the web
client's filter sidebar.
"""

# Sentinel selector value meaning "no constraint" for location, category
# and date-posted filters
FILTER_ALL = "all"

# Budget slider bounds (INR), step 1000 on the client
BUDGET_RANGE_MIN = 0
BUDGET_RANGE_MAX = 50000

LOCATIONS = {
    "koregaon-park": "Koregaon Park",
    "hinjewadi": "Hinjewadi",
    "viman-nagar": "Viman Nagar",
    "kothrud": "Kothrud",
    "wakad": "Wakad",
}

CATEGORIES = {
    "photography": "Photography",
    "baking": "Baking",
    "design": "Design",
    "fitness": "Fitness",
    "crafts": "Crafts",
    "content": "Content Creation",
}

DATE_POSTED_BUCKETS = {
    "today": "Today",
    "week": "This Week",
    "month": "This Month",
}

# Icon palette for ideas salvaged from non-JSON model output
SALVAGE_ICONS = ["💡", "🚀", "💰", "🎯", "✨", "🔥", "💎", "🌟", "🎨", "📱"]

# Generic topic used when a browsing request carries no hobby
GENERIC_TOPIC = "your hobby"
