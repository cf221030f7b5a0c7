# ===============================================================
#  News / reading scenarios
# ===============================================================

NEWS_SCENARIOS = [
    {
        "name": "msn",
        "duration": 30,
        "steps": [
            {"type": "goto", "url": "https://www.msn.com"},
            {"type": "wait", "value": 5},
            {"type": "scroll", "value": 2, "repeat": 3},
        ],
    },
    {
        "name": "msnbc",
        "duration": 30,
        "steps": [
            {"type": "goto", "url": "https://www.msnbc.com"},
            {"type": "wait", "value": 5},
            {"type": "scroll", "value": 1, "repeat": 4},
        ],
    },
    {
        "name": "cnnTopStory",
        "duration": 40,
        "steps": [
            {"type": "goto", "url": "https://www.cnn.com"},
            {"type": "wait", "value": 3},
            {"type": "click", "selector": "h2.container_lead-package__title_url-text"},
            {"type": "scroll", "value": 1, "repeat": 5},
        ],
    },
    {
        "name": "cnnOneStory",
        "duration": 30,
        "steps": [
            {"type": "goto", "url": "https://www.cnn.com/2016/08/30/politics/donald-trump-immigration-speech/index.html"},
            {"type": "scroll", "value": 1, "repeat": 6},
        ],
    },
    {
        "name": "yahooNews",
        "duration": 30,
        "steps": [
            {"type": "goto", "url": "https://news.yahoo.com"},
            {"type": "scroll", "value": 2, "repeat": 3},
        ],
    },
    {
        "name": "bbcNews",
        "duration": 30,
        "steps": [
            {"type": "goto", "url": "https://www.bbc.com/news"},
            {"type": "wait", "value": 3},
            {"type": "scroll", "value": 1, "repeat": 4},
        ],
    },
    {
        "name": "techRadar",
        "duration": 30,
        "steps": [
            {"type": "goto", "url": "https://www.techradar.com/reviews/pc-mac/tablets/microsoft-surface-pro-4-1290285/review"},
            {"type": "scroll", "value": 1, "repeat": 8},
        ],
    },
    {
        "name": "espnHomepage",
        "duration": 30,
        "steps": [
            {"type": "goto", "url": "https://www.espn.com"},
            {"type": "wait", "value": 5},
            {"type": "scroll", "value": 2, "repeat": 2},
        ],
    },
    {
        "name": "wikipedia",
        "duration": 30,
        "steps": [
            {"type": "goto", "url": "https://en.wikipedia.org/wiki/United_States"},
            {"type": "scroll", "value": 3, "repeat": 5},
        ],
    },
]
