"""Static role templates used when no completion is available."""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class RoleTemplate:
    key: str
    keywords: tuple[str, ...]
    track: str
    curriculum: tuple[str, ...]  # skills in teaching order
    prerequisites: tuple[str, ...]
    outcomes: tuple[str, ...]
    job_titles: tuple[str, ...]
    projects: tuple[str, ...]
    market_demand: str
    average_salary: str
    industry_keywords: tuple[str, ...] = ()


ROLE_TEMPLATES: tuple[RoleTemplate, ...] = (
    RoleTemplate(
        key="frontend",
        keywords=("frontend", "front-end", "front end", "react", "ui developer", "web developer", "angular", "vue"),
        track="Frontend Development",
        curriculum=("HTML", "CSS", "JavaScript", "TypeScript", "React", "State Management", "Testing", "Web Performance"),
        prerequisites=("Basic computer literacy", "Comfort with a text editor"),
        outcomes=(
            "Build responsive, accessible web interfaces",
            "Ship a component-based single page application",
            "Test and profile frontend code",
        ),
        job_titles=("Frontend Developer", "UI Engineer", "React Developer"),
        projects=("Personal portfolio site", "Interactive dashboard", "E-commerce product page"),
        market_demand="High demand with steady growth in web product teams",
        average_salary="$70,000 - $120,000",
        industry_keywords=("responsive design", "accessibility", "SPA", "component library"),
    ),
    RoleTemplate(
        key="backend",
        keywords=("backend", "back-end", "back end", "server", "api", "node", "java developer", "python developer", "software engineer"),
        track="Backend Development",
        curriculum=("Python", "HTTP & REST", "SQL", "Databases", "Authentication", "Caching", "Docker", "System Design"),
        prerequisites=("Basic programming knowledge", "Command line familiarity"),
        outcomes=(
            "Design and implement REST APIs",
            "Model and query relational data",
            "Deploy a containerized service",
        ),
        job_titles=("Backend Developer", "API Engineer", "Software Engineer"),
        projects=("REST API for a todo app", "URL shortener service", "Job queue with background workers"),
        market_demand="High demand across product and platform teams",
        average_salary="$80,000 - $135,000",
        industry_keywords=("REST", "microservices", "scalability", "SQL"),
    ),
    RoleTemplate(
        key="data",
        keywords=("data", "machine learning", "ml", "analyst", "analytics", "scientist", "ai engineer"),
        track="Data Science",
        curriculum=("Python", "Statistics", "SQL", "Pandas", "Data Visualization", "Machine Learning", "Model Evaluation", "MLOps Basics"),
        prerequisites=("High-school mathematics", "Basic programming knowledge"),
        outcomes=(
            "Clean, explore and visualize real datasets",
            "Train and evaluate predictive models",
            "Communicate findings to stakeholders",
        ),
        job_titles=("Data Analyst", "Data Scientist", "Machine Learning Engineer"),
        projects=("Exploratory analysis of a public dataset", "Churn prediction model", "Interactive analytics dashboard"),
        market_demand="Very high demand with strong growth expected",
        average_salary="$85,000 - $145,000",
        industry_keywords=("machine learning", "statistics", "data pipeline", "visualization"),
    ),
    RoleTemplate(
        key="design",
        keywords=("design", "designer", "ux", "ui/ux", "product designer", "figma"),
        track="UI/UX Design",
        curriculum=("Design Principles", "Typography", "Color Theory", "Figma", "User Research", "Wireframing", "Prototyping", "Usability Testing"),
        prerequisites=("Interest in visual communication", "Access to a design tool"),
        outcomes=(
            "Run lightweight user research",
            "Produce wireframes and high-fidelity prototypes",
            "Present a case-study portfolio",
        ),
        job_titles=("UI Designer", "UX Designer", "Product Designer"),
        projects=("Mobile app redesign case study", "Design system starter kit", "Usability test report"),
        market_demand="Solid demand, portfolio quality is decisive",
        average_salary="$65,000 - $115,000",
        industry_keywords=("user research", "prototyping", "design systems", "usability"),
    ),
    RoleTemplate(
        key="devops",
        keywords=("devops", "sre", "site reliability", "cloud", "platform engineer", "infrastructure", "kubernetes"),
        track="DevOps Engineering",
        curriculum=("Linux", "Networking", "Git", "Docker", "CI/CD", "Kubernetes", "Infrastructure as Code", "Monitoring"),
        prerequisites=("Command line familiarity", "Basic scripting"),
        outcomes=(
            "Automate build, test and deploy pipelines",
            "Operate containerized workloads",
            "Set up monitoring and alerting",
        ),
        job_titles=("DevOps Engineer", "Site Reliability Engineer", "Cloud Engineer"),
        projects=("CI pipeline for an open-source repo", "Kubernetes deployment of a web app", "Terraform-managed cloud environment"),
        market_demand="High demand as teams move to cloud-native delivery",
        average_salary="$90,000 - $140,000",
        industry_keywords=("CI/CD", "Kubernetes", "infrastructure as code", "observability"),
    ),
)

GENERIC_TEMPLATE = RoleTemplate(
    key="generic",
    keywords=(),
    track="Professional Development",
    curriculum=("Industry Fundamentals", "Core Tools", "Communication", "Project Management", "Problem Solving", "Portfolio Building"),
    prerequisites=("Motivation to learn", "A few hours per week"),
    outcomes=(
        "Understand the fundamentals of the target role",
        "Complete practical projects for a portfolio",
        "Prepare for interviews",
    ),
    job_titles=(),
    projects=("Capstone portfolio project", "Case study write-up", "Mentored mini project"),
    market_demand="Varies by region and industry",
    average_salary="Varies by region and seniority",
    industry_keywords=("communication", "problem solving", "collaboration"),
)


def pick_template(role: str | None) -> RoleTemplate:
    """Pick the role template whose keywords best match ``role``; generic otherwise."""
    text = (role or "").lower()
    best, best_hits = GENERIC_TEMPLATE, 0
    for template in ROLE_TEMPLATES:
        hits = sum(1 for kw in template.keywords if re.search(rf"\b{re.escape(kw)}\b", text))
        if hits > best_hits:
            best, best_hits = template, hits
    return best
