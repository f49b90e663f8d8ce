# content.py - hard-coded data behind the resource library and the Field Notes archive
from typing import List, Optional

RESOURCE_CATEGORIES = [
    {"id": "all", "label": "All Resources"},
    {"id": "clinical-skills", "label": "Clinical Skills"},
    {"id": "cultural-competence", "label": "Cultural Competence"},
    {"id": "documentation", "label": "Documentation"},
    {"id": "career", "label": "Career Development"},
]

CATEGORY_IDS = {c["id"] for c in RESOURCE_CATEGORIES}

RESOURCES = [
    {
        "type": "video",
        "title": "Cultural Assessment Framework",
        "description": "15-minute walkthrough of the assessment process I use with every client. Covers key questions, common pitfalls, and how to document cultural factors effectively.",
        "category": "cultural-competence",
        "meta": "15 min",
        "featured": True,
    },
    {
        "type": "pdf",
        "title": "Clinical Documentation Checklist",
        "description": "Essential elements for progress notes, treatment plans, and assessment reports. What to include, what to skip, and how to write efficiently.",
        "category": "documentation",
        "meta": "8 pages",
        "featured": True,
    },
    {
        "type": "article",
        "title": "Supervision: What to Expect",
        "description": "How supervision works at SCTC: structure, expectations, feedback process, and how we support your growth as a clinician.",
        "category": "clinical-skills",
        "meta": "6 min read",
        "featured": False,
    },
    {
        "type": "video",
        "title": "Writing Culturally Responsive Reports",
        "description": "How to integrate cultural formulation into your clinical documentation without it feeling like an add-on or checkbox exercise.",
        "category": "cultural-competence",
        "meta": "22 min",
        "featured": False,
    },
    {
        "type": "pdf",
        "title": "APPIC Application Timeline",
        "description": "Month-by-month guide to the internship application process. When to reach out to sites, what to prepare, and how to stay organized.",
        "category": "career",
        "meta": "6 pages",
        "featured": False,
    },
    {
        "type": "article",
        "title": "Common Assessment Mistakes",
        "description": "The errors I see most often in student reports and how to avoid them. From diagnostic reasoning to cultural blind spots.",
        "category": "clinical-skills",
        "meta": "8 min read",
        "featured": False,
    },
    {
        "type": "external",
        "title": "APA Multicultural Guidelines",
        "description": "Official guidelines for integrating cultural considerations into psychological practice. Essential reading for all trainees.",
        "category": "cultural-competence",
        "meta": "External link",
        "featured": False,
    },
    {
        "type": "pdf",
        "title": "Interview Preparation Guide",
        "description": "What training sites are really asking when they interview you, and how to prepare answers that show clinical maturity.",
        "category": "career",
        "meta": "10 pages",
        "featured": False,
    },
    {
        "type": "video",
        "title": "Clinical Formulation Workshop",
        "description": "How to think through a case from assessment data to treatment recommendations. Includes two worked examples.",
        "category": "clinical-skills",
        "meta": "28 min",
        "featured": False,
    },
]

# newest first, as listed on the home page
NEWSLETTER_ISSUES = [
    {
        "number": 4,
        "slug": "what-supervisors-actually-look-for",
        "date": "June 2026",
        "title": "What Supervisors Actually Look For",
        "excerpt": "Beyond the credentials: how to demonstrate clinical judgment in your application materials and interviews.",
        "read_time": "6 min read",
        "access": "subscribers",
        "topics": ["Career Advice", "Applications"],
    },
    {
        "number": 3,
        "slug": "understanding-training-site-culture",
        "date": "May 2026",
        "title": "Understanding Training Site Culture",
        "excerpt": "Questions to ask during internship interviews that reveal whether a site will actually support your development.",
        "read_time": "5 min read",
        "access": "subscribers",
        "topics": ["Internship", "Career Advice"],
    },
    {
        "number": 2,
        "slug": "cultural-formulation-in-practice",
        "date": "April 2026",
        "title": "Cultural Formulation in Practice",
        "excerpt": "Moving beyond theoretical frameworks to actual clinical application, with case examples and common pitfalls.",
        "read_time": "8 min read",
        "access": "subscribers",
        "topics": ["Cultural Competence", "Clinical Skills"],
    },
    {
        "number": 1,
        "slug": "writing-your-first-assessment-report",
        "date": "March 2026",
        "title": "Writing Your First Assessment Report",
        "excerpt": "The structure, language, and thinking process that goes into clinical documentation that supervisors trust.",
        "read_time": "7 min read",
        "access": "preview",
        "topics": ["Clinical Skills", "Documentation"],
    },
]


def filter_resources(query: str = "", category: str = "all") -> List[dict]:
    needle = (query or "").strip().lower()
    matches = []
    for r in RESOURCES:
        if category != "all" and r["category"] != category:
            continue
        if needle and needle not in r["title"].lower() and needle not in r["description"].lower():
            continue
        matches.append(r)
    return matches


def featured_resources() -> List[dict]:
    return [r for r in RESOURCES if r["featured"]]


def get_issue(slug: str) -> Optional[dict]:
    for issue in NEWSLETTER_ISSUES:
        if issue["slug"] == slug:
            return issue
    return None


def related_issues(slug: str) -> List[dict]:
    return sorted(
        (i for i in NEWSLETTER_ISSUES if i["slug"] != slug),
        key=lambda i: i["number"],
    )
