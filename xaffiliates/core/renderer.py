"""Jinja2 rendering of the landing, dashboard and error pages."""

from jinja2 import Environment, PackageLoader, select_autoescape

from xaffiliates.models.dashboard import DashboardData

DEFAULT_ERROR_MESSAGE = "Failed to load dashboard. Please try again."


def thousands(value: int | None) -> str:
    """Format a count with comma separators."""
    return f"{value or 0:,}"


def _build_environment() -> Environment:
    env = Environment(
        loader=PackageLoader("xaffiliates", "templates"),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["thousands"] = thousands
    return env


templates = _build_environment()


def render_home(authenticated: bool, login_path: str = "/login") -> str:
    """Landing page with a login or dashboard link."""
    return templates.get_template("home.html").render(
        authenticated=authenticated,
        login_path=login_path,
    )


def render_dashboard(data: DashboardData) -> str:
    """Dashboard page for a user and their organization's affiliates."""
    return templates.get_template("dashboard.html").render(
        user=data.user,
        has_affiliation=data.has_affiliation,
        affiliates=data.affiliates,
        org_user_id=data.org_user_id,
    )


def render_error(message: str | None = None) -> str:
    """Error page showing a failure message."""
    return templates.get_template("error.html").render(
        message=message or DEFAULT_ERROR_MESSAGE,
    )
