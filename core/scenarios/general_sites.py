# ===============================================================
#  Search / shopping / misc scenarios
# ===============================================================

GENERAL_SCENARIOS = [
    {
        "name": "amazon",
        "duration": 40,
        "steps": [
            {"type": "goto", "url": "https://www.amazon.com"},
            {"type": "type", "selector": "#twotabsearchtextbox", "value": "Game of Thrones"},
            {"type": "press", "selector": "#twotabsearchtextbox", "value": "Enter"},
            {"type": "wait", "value": 3},
            {"type": "scroll", "value": 1, "repeat": 4},
        ],
    },
    {
        "name": "google",
        "duration": 30,
        "steps": [
            {"type": "goto", "url": "https://www.google.com"},
            {"type": "type", "selector": "textarea[name=q]", "value": "Seattle"},
            {"type": "press", "selector": "textarea[name=q]", "value": "Enter"},
            {"type": "wait", "value": 3},
        ],
    },
    {
        "name": "yelpSeattleDinner",
        "duration": 30,
        "steps": [
            {"type": "goto", "url": "https://www.yelp.com/search?find_desc=dinner&find_loc=Seattle,+WA"},
            {"type": "scroll", "value": 1, "repeat": 4},
        ],
    },
    {
        "name": "zillowSearch",
        "duration": 30,
        "steps": [
            {"type": "goto", "url": "https://www.zillow.com/homes/Seattle-WA_rb/"},
            {"type": "wait", "value": 5},
            {"type": "scroll", "value": 1, "repeat": 3},
        ],
    },
    {
        "name": "aboutblank",
        "duration": 10,
        "steps": [{"type": "goto", "url": "about:blank"}],
    },
    {
        "name": "fastScenario",
        "duration": 5,
        "steps": [
            {"type": "goto", "url": "https://www.bing.com"},
            {"type": "wait", "value": 1},
        ],
    },
]
