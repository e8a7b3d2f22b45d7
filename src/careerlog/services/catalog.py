"""Built-in technology catalog and development process stages.

Static configuration: not user-editable and not persisted separately.
"""

from careerlog.models.enums import DevelopmentProcess, TechnologyCategory

PREDEFINED_TECHNOLOGIES: dict[TechnologyCategory, list[str]] = {
    TechnologyCategory.FRONTEND: [
        "JavaScript", "TypeScript", "React", "Vue.js", "Angular", "Next.js", "HTML/CSS",
    ],
    TechnologyCategory.BACKEND: [
        "Java", "Python", "Node.js", "C#", "PHP", "Go", "Ruby",
    ],
    TechnologyCategory.FRAMEWORK: [
        "Spring Boot", "Django", "Express.js", "Laravel", ".NET", "Ruby on Rails",
    ],
    TechnologyCategory.DATABASE: [
        "MySQL", "PostgreSQL", "Oracle", "MongoDB", "Redis", "SQL Server",
    ],
    TechnologyCategory.CLOUD: [
        "AWS", "Azure", "GCP", "Docker", "Kubernetes", "Terraform",
    ],
    TechnologyCategory.DEVTOOLS: [
        "Git", "GitHub", "GitLab", "Jenkins", "GitHub Actions", "JIRA",
    ],
}


def category_for(name: str) -> TechnologyCategory | None:
    """Return the catalog category listing ``name`` exactly, or None."""
    for category in TechnologyCategory:
        if name in PREDEFINED_TECHNOLOGIES.get(category, []):
            return category
    return None


def is_predefined(name: str) -> bool:
    return category_for(name) is not None


def search_catalog(query: str = "") -> list[tuple[TechnologyCategory, list[str]]]:
    """Catalog entries whose names contain ``query``, grouped by category.

    Categories without a match are dropped; categories are returned in key order.
    """
    needle = query.strip().casefold()
    results = []
    for category in sorted(PREDEFINED_TECHNOLOGIES, key=str):
        names = PREDEFINED_TECHNOLOGIES[category]
        if needle:
            names = [n for n in names if needle in n.casefold()]
        if names:
            results.append((category, list(names)))
    return results


def process_order(name: str) -> int | None:
    """Canonical position of a process stage name, or None if unknown."""
    try:
        return DevelopmentProcess(name).order
    except ValueError:
        return None


def process_stages() -> list[tuple[str, int]]:
    """All stages as (name, order) pairs in canonical order."""
    return [(stage.value, stage.order) for stage in DevelopmentProcess]
