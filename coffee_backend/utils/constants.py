"""
Quiz constants shared by schemas, services and the options endpoint.

SUPPORTED_LANGUAGES is the closed set accepted for PreferenceRequest.language.
The remaining catalogues only drive the quiz screens; framework, ide and
vibe accept any non-empty string.
"""

SUPPORTED_LANGUAGES = ("Node.js", "Python", "Java", "Go", "Ruby", ".NET", "PHP")

FRAMEWORKS_BY_LANGUAGE = {
    "Node.js": ["Express.js", "Next.js", "React", "Vue.js", "NestJS", "Fastify"],
    "Python": ["Django", "Flask", "FastAPI", "Pandas", "TensorFlow", "PyTorch"],
    "Java": [
        "Spring Boot", "Spring Framework", "Hibernate",
        "Apache Struts", "Play Framework", "Quarkus",
    ],
    "Go": ["Gin", "Echo", "Fiber", "Beego", "Revel", "Buffalo"],
    "Ruby": ["Ruby on Rails", "Sinatra", "Hanami", "Padrino", "Grape", "Roda"],
    ".NET": ["ASP.NET Core", "Entity Framework", "Blazor", "MAUI", "WPF", "Xamarin"],
    "PHP": ["Laravel", "Symfony", "CodeIgniter", "Zend Framework", "CakePHP", "Phalcon"],
}

IDES = [
    {"value": "VS Code", "label": "VS Code"},
    {"value": "NeoVim", "label": "NeoVim"},
    {"value": "JetBrains", "label": "JetBrains IDEs"},
    {"value": "Cursor", "label": "Cursor"},
    {"value": "Windsurf", "label": "Windsurf"},
    {"value": "Zed", "label": "Zed"},
    {"value": "Codex", "label": "Codex"},
    {"value": "Gemini CLI", "label": "Gemini CLI"},
]

VIBES = [
    {
        "value": "elegantly-simple",
        "label": "Elegantly Simple",
        "description": (
            "Clean, minimal code that just works. You believe in the power "
            "of simplicity and readable solutions."
        ),
    },
    {
        "value": "performance-obsessed",
        "label": "Performance Obsessed",
        "description": (
            "Every millisecond matters. You optimize for speed, efficiency, "
            "and resource usage above all else."
        ),
    },
    {
        "value": "cutting-edge-explorer",
        "label": "Cutting-Edge Explorer",
        "description": (
            "Always trying the latest frameworks, languages, and tools. "
            "You love being on the bleeding edge of tech."
        ),
    },
    {
        "value": "battle-tested-reliable",
        "label": "Battle-Tested & Reliable",
        "description": (
            "You prefer proven solutions and stable technologies. "
            "If it ain't broke, don't fix it."
        ),
    },
    {
        "value": "creative-problem-solver",
        "label": "Creative Problem Solver",
        "description": (
            "You find unique, innovative approaches to challenges. "
            "Thinking outside the box is your specialty."
        ),
    },
    {
        "value": "data-driven",
        "label": "Data-Driven",
        "description": (
            "Numbers don't lie. You make decisions based on metrics, "
            "analytics, and solid evidence."
        ),
    },
]

# Supabase table holding one row per quiz session
QUIZ_RESPONSES_TABLE = "quiz_responses"
