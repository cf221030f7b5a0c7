# ===============================================================
#  Social / media scenarios
#  ${USERNAME} / ${PASSWORD} are filled in from the credentials file at run time
# ===============================================================

SOCIAL_SCENARIOS = [
    {
        "name": "facebook",
        "duration": 60,
        "steps": [
            {"type": "goto", "url": "https://www.facebook.com"},
            {"type": "type", "selector": "#email", "value": "${USERNAME}"},
            {"type": "type", "selector": "#pass", "value": "${PASSWORD}"},
            {"type": "press", "selector": "#pass", "value": "Enter"},
            {"type": "wait", "value": 5},
            {"type": "scroll", "value": 1, "repeat": 10},
        ],
    },
    {
        "name": "youtube",
        "duration": 60,
        "steps": [
            {"type": "goto", "url": "https://www.youtube.com/watch?v=l42U5Cwn1Y0"},
            {"type": "wait", "value": 50},
        ],
    },
    {
        "name": "linkedinSatya",
        "duration": 30,
        "steps": [
            {"type": "goto", "url": "https://www.linkedin.com/in/satyanadella"},
            {"type": "scroll", "value": 1, "repeat": 4},
        ],
    },
    {
        "name": "twitterPublic",
        "duration": 30,
        "steps": [
            {"type": "goto", "url": "https://twitter.com/MicrosoftEdge"},
            {"type": "scroll", "value": 1, "repeat": 6},
        ],
    },
    {
        "name": "tumblrTrending",
        "duration": 30,
        "steps": [
            {"type": "goto", "url": "https://www.tumblr.com/explore/trending"},
            {"type": "scroll", "value": 2, "repeat": 5},
        ],
    },
    {
        "name": "instagramNYPL",
        "duration": 30,
        "steps": [
            {"type": "goto", "url": "https://www.instagram.com/nypl"},
            {"type": "scroll", "value": 1, "repeat": 5},
        ],
    },
    {
        "name": "pinterestExplore",
        "duration": 30,
        "steps": [
            {"type": "goto", "url": "https://www.pinterest.com/categories/popular"},
            {"type": "scroll", "value": 2, "repeat": 5},
        ],
    },
]
