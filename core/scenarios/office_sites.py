# ===============================================================
#  Productivity scenarios (need credentials)
# ===============================================================

_MS_LOGIN = [
    {"type": "type", "selector": "input[type=email]", "value": "${USERNAME}"},
    {"type": "press", "selector": "input[type=email]", "value": "Enter"},
    {"type": "wait", "value": 2},
    {"type": "type", "selector": "input[type=password]", "value": "${PASSWORD}"},
    {"type": "press", "selector": "input[type=password]", "value": "Enter"},
    {"type": "wait", "value": 5},
]

OFFICE_SCENARIOS = [
    {
        "name": "gmail",
        "duration": 60,
        "steps": [
            {"type": "goto", "url": "https://mail.google.com"},
            {"type": "type", "selector": "#identifierId", "value": "${USERNAME}"},
            {"type": "press", "selector": "#identifierId", "value": "Enter"},
            {"type": "wait", "value": 2},
            {"type": "type", "selector": "input[name=Passwd]", "value": "${PASSWORD}"},
            {"type": "press", "selector": "input[name=Passwd]", "value": "Enter"},
            {"type": "wait", "value": 5},
            {"type": "click", "selector": "tr.zA", "repeat": 5},
        ],
    },
    {
        "name": "outlookOffice",
        "duration": 60,
        "steps": [{"type": "goto", "url": "https://outlook.office.com"}, *_MS_LOGIN],
    },
    {
        "name": "outlookEmail",
        "duration": 60,
        "steps": [
            {"type": "goto", "url": "https://outlook.live.com"},
            *_MS_LOGIN,
            {"type": "click", "selector": "div[role=option]", "repeat": 5},
        ],
    },
    {
        "name": "officePowerpoint",
        "duration": 60,
        "steps": [{"type": "goto", "url": "https://www.office.com/launch/powerpoint"}, *_MS_LOGIN],
    },
    {
        "name": "officeLauncher",
        "duration": 40,
        "steps": [{"type": "goto", "url": "https://www.office.com"}, *_MS_LOGIN],
    },
    {
        "name": "powerBi",
        "duration": 60,
        "steps": [
            {"type": "goto", "url": "https://app.powerbi.com"},
            *_MS_LOGIN,
            {"type": "scroll", "value": 1, "repeat": 3},
        ],
    },
    {
        "name": "azureDashboard",
        "duration": 60,
        "steps": [{"type": "goto", "url": "https://portal.azure.com"}, *_MS_LOGIN],
    },
]
