"""
Skill Dictionary

Static reference data for skill extraction and normalization:
- SKILL_CATALOG: recognized lowercase skill tokens grouped by domain
- SKILL_ALIASES: lowercase token -> canonical display name

Both tables are built once at import time and exposed read-only.
To recognize a new skill, append its token to a domain tuple (and add a
display name below if simple capitalization is wrong).
"""

from types import MappingProxyType
from typing import Dict, Optional, Tuple

_CATALOG: Dict[str, Tuple[str, ...]] = {
    "languages": (
        "javascript", "js", "typescript", "ts", "python", "java", "c++", "c#", "csharp",
        "php", "ruby", "go", "golang", "rust", "swift", "kotlin", "scala", "matlab",
        "perl", "objective-c", "html", "html5", "css", "css3", "sass", "scss", "sql",
        "bash",
    ),
    "frameworks": (
        "react", "reactjs", "react.js", "vue", "vuejs", "vue.js", "angular", "angularjs",
        "svelte", "jquery", "next.js", "nextjs", "nuxt.js", "bootstrap", "tailwind",
        "tailwindcss", "node.js", "nodejs", "express", "expressjs", "django", "flask",
        "fastapi", "spring", "spring boot", "springboot", "laravel", "symfony", "rails",
        "ruby on rails", ".net", "dotnet", "asp.net", "nest.js", "nestjs", "graphql",
    ),
    "databases": (
        "mysql", "postgresql", "postgres", "mongodb", "mongo", "redis", "sqlite",
        "oracle", "sql server", "elasticsearch", "cassandra", "dynamodb", "firebase",
        "supabase", "nosql",
    ),
    "cloud_devops": (
        "aws", "amazon web services", "azure", "microsoft azure", "gcp", "google cloud",
        "heroku", "docker", "kubernetes", "k8s", "jenkins", "terraform", "ansible",
        "github actions", "gitlab ci", "circleci", "ci/cd", "cicd", "linux", "ubuntu",
        "nginx", "apache", "serverless", "devops",
    ),
    "mobile": (
        "ios", "android", "react native", "flutter", "xamarin", "ionic", "cordova",
    ),
    "data_ml": (
        "machine learning", "ml", "deep learning", "ai", "artificial intelligence",
        "data science", "big data", "pandas", "numpy", "matplotlib", "tensorflow",
        "pytorch", "scikit-learn", "hadoop", "spark", "kafka", "tableau", "power bi",
        "jupyter", "computer vision", "nlp",
    ),
    "tools": (
        "git", "github", "gitlab", "bitbucket", "jira", "confluence", "slack", "figma",
        "sketch", "photoshop", "illustrator", "postman", "swagger", "webpack", "vite",
        "jest", "mocha", "cypress", "selenium", "junit", "pytest", "excel",
    ),
    "methodologies": (
        "agile", "scrum", "kanban", "api", "rest", "restful", "microservices",
        "unit testing", "integration testing", "tdd", "bdd", "design patterns",
    ),
}

# Tokens whose canonical form is another spelling, or whose display casing
# is not simple first-letter capitalization.
_ALIASES: Dict[str, str] = {
    # Languages
    "js": "JavaScript",
    "javascript": "JavaScript",
    "ts": "TypeScript",
    "typescript": "TypeScript",
    "golang": "Go",
    "csharp": "C#",
    "c#": "C#",
    "c++": "C++",
    "php": "PHP",
    "matlab": "MATLAB",
    "objective-c": "Objective-C",
    "html": "HTML",
    "html5": "HTML5",
    "css": "CSS",
    "css3": "CSS3",
    "sass": "Sass",
    "scss": "SCSS",
    "sql": "SQL",
    # Frameworks
    "reactjs": "React",
    "react.js": "React",
    "vue": "Vue.js",
    "vuejs": "Vue.js",
    "vue.js": "Vue.js",
    "angularjs": "Angular",
    "jquery": "jQuery",
    "nextjs": "Next.js",
    "next.js": "Next.js",
    "nuxt.js": "Nuxt.js",
    "tailwind": "Tailwind CSS",
    "tailwindcss": "Tailwind CSS",
    "nodejs": "Node.js",
    "node.js": "Node.js",
    "node": "Node.js",
    "express": "Express.js",
    "expressjs": "Express.js",
    "fastapi": "FastAPI",
    "spring boot": "Spring Boot",
    "springboot": "Spring Boot",
    "rails": "Ruby on Rails",
    "ruby on rails": "Ruby on Rails",
    ".net": ".NET",
    "dotnet": ".NET",
    "asp.net": "ASP.NET",
    "nest.js": "NestJS",
    "nestjs": "NestJS",
    "graphql": "GraphQL",
    # Databases
    "mysql": "MySQL",
    "postgresql": "PostgreSQL",
    "postgres": "PostgreSQL",
    "mongodb": "MongoDB",
    "mongo": "MongoDB",
    "sqlite": "SQLite",
    "sql server": "SQL Server",
    "dynamodb": "DynamoDB",
    "nosql": "NoSQL",
    # Cloud & DevOps
    "aws": "AWS",
    "amazon web services": "AWS",
    "azure": "Azure",
    "microsoft azure": "Azure",
    "gcp": "Google Cloud",
    "google cloud": "Google Cloud",
    "k8s": "Kubernetes",
    "github actions": "GitHub Actions",
    "gitlab ci": "GitLab CI",
    "circleci": "CircleCI",
    "ci/cd": "CI/CD",
    "cicd": "CI/CD",
    "devops": "DevOps",
    # Mobile
    "ios": "iOS",
    "react native": "React Native",
    # Data & ML
    "ml": "Machine Learning",
    "machine learning": "Machine Learning",
    "deep learning": "Deep Learning",
    "ai": "Artificial Intelligence",
    "artificial intelligence": "Artificial Intelligence",
    "data science": "Data Science",
    "big data": "Big Data",
    "numpy": "NumPy",
    "tensorflow": "TensorFlow",
    "pytorch": "PyTorch",
    "scikit-learn": "scikit-learn",
    "power bi": "Power BI",
    "computer vision": "Computer Vision",
    "nlp": "NLP",
    # Tools
    "github": "GitHub",
    "gitlab": "GitLab",
    "unit testing": "Unit Testing",
    "integration testing": "Integration Testing",
    # Methodologies
    "api": "API",
    "rest": "REST",
    "restful": "REST",
    "tdd": "TDD",
    "bdd": "BDD",
    "design patterns": "Design Patterns",
}


def _with_canonical_entries(aliases: Dict[str, str]) -> Dict[str, str]:
    """Make every canonical name resolve to itself so lookups are idempotent."""
    table = dict(aliases)
    for canonical in aliases.values():
        table.setdefault(canonical.lower(), canonical)
    return table


SKILL_CATALOG = MappingProxyType(_CATALOG)
SKILL_ALIASES = MappingProxyType(_with_canonical_entries(_ALIASES))

# Flat, de-duplicated token list in catalog order (languages first)
ALL_SKILL_TOKENS: Tuple[str, ...] = tuple(
    dict.fromkeys(token for tokens in _CATALOG.values() for token in tokens)
)

_TOKEN_DOMAINS = MappingProxyType({
    token: domain
    for domain, tokens in reversed(list(_CATALOG.items()))
    for token in tokens
})


def all_skill_tokens() -> Tuple[str, ...]:
    """Return every recognized skill token in catalog order."""
    return ALL_SKILL_TOKENS


def is_known_skill(token: str) -> bool:
    return token.strip().lower() in _TOKEN_DOMAINS


def domain_of(token: str) -> Optional[str]:
    """Return the first catalog domain containing the token, if any."""
    return _TOKEN_DOMAINS.get(token.strip().lower())


def alias_for(token: str) -> Optional[str]:
    """Return the canonical name registered for a lowercase token, if any."""
    return SKILL_ALIASES.get(token)
