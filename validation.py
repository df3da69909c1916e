from __future__ import annotations
import re
from datetime import date
from typing import Any, List
from urllib.parse import urlparse
from pydantic import ValidationError
from models import PomodoroSettings


TASK_TITLE_MAX = 200
TASK_DESCRIPTION_MAX = 2000
COURSE_NAME_MAX = 100
FULL_NAME_MAX = 100
PASSWORD_MIN = 8

ALLOWED_AVATAR_DOMAINS = [
    "imgur.com",
    "i.imgur.com",
    "gravatar.com",
    "avatars.githubusercontent.com",
    "lh3.googleusercontent.com",
    "cloudinary.com",
    "res.cloudinary.com",
]

COMMON_PASSWORDS = {
    "password", "12345678", "123456789", "qwerty123", "abc12345",
    "password1", "iloveyou", "11111111", "admin123", "welcome1",
}

_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_COLOR_RE = re.compile(r"#[0-9A-Fa-f]{6}")

_POMODORO_KEYS = {"focus_minutes", "break_minutes", "selected_task_id"}

_HTML_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#x27;",
    "/": "&#x2F;",
}


def validate_task_title(title: str) -> str:
    trimmed = title.strip()
    if not trimmed:
        raise ValueError("Title is required.")
    if len(trimmed) > TASK_TITLE_MAX:
        raise ValueError(f"Title cannot exceed {TASK_TITLE_MAX} characters.")
    return trimmed


def validate_task_description(description: str) -> str:
    if len(description) > TASK_DESCRIPTION_MAX:
        raise ValueError(f"Description cannot exceed {TASK_DESCRIPTION_MAX} characters.")
    return description


def validate_course_name(name: str) -> str:
    trimmed = name.strip()
    if not trimmed:
        raise ValueError("Name is required.")
    if len(trimmed) > COURSE_NAME_MAX:
        raise ValueError(f"Name cannot exceed {COURSE_NAME_MAX} characters.")
    return trimmed


def validate_full_name(name: str) -> str:
    if name and len(name) > FULL_NAME_MAX:
        raise ValueError(f"Name cannot exceed {FULL_NAME_MAX} characters.")
    return name


def validate_date_format(value: str) -> date | None:
    """
    Optional YYYY-MM-DD date. Empty input is allowed and yields None.
    """
    if not value:
        return None
    if not _DATE_RE.fullmatch(value):
        raise ValueError("Invalid date format.")
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise ValueError("Invalid date.") from None


def validate_color(color: str) -> str:
    if color and not _COLOR_RE.fullmatch(color):
        raise ValueError("Invalid color format (use #RRGGBB).")
    return color


def validate_avatar_url(url: str) -> str:
    if not url:
        return url
    parsed = urlparse(url)
    host = parsed.hostname or ""
    if not parsed.scheme or not host:
        raise ValueError("Invalid URL.")
    if parsed.scheme != "https":
        raise ValueError("URL must use HTTPS.")
    if not any(host == d or host.endswith("." + d) for d in ALLOWED_AVATAR_DOMAINS):
        raise ValueError("Domain not allowed for avatars.")
    return url


def password_problems(password: str) -> List[str]:
    problems: List[str] = []
    if len(password) < PASSWORD_MIN:
        problems.append(f"At least {PASSWORD_MIN} characters")
    if not re.search(r"[A-Z]", password):
        problems.append("At least one uppercase letter")
    if not re.search(r"[a-z]", password):
        problems.append("At least one lowercase letter")
    if not re.search(r"[0-9]", password):
        problems.append("At least one number")
    if not re.search(r"[^A-Za-z0-9]", password):
        problems.append("At least one special character (!@#$%...)")
    if password.lower() in COMMON_PASSWORDS:
        problems.append("This password is too common")
    return problems


def validate_password(password: str) -> str:
    problems = password_problems(password)
    if problems:
        raise ValueError("; ".join(problems))
    return password


def password_strength(password: str) -> int:
    strength = 0
    if len(password) >= 8:
        strength += 1
    if len(password) >= 12:
        strength += 1
    if re.search(r"[A-Z]", password) and re.search(r"[a-z]", password):
        strength += 1
    if re.search(r"[0-9]", password):
        strength += 1
    if re.search(r"[^A-Za-z0-9]", password):
        strength += 1
    return min(strength, 4)


def sanitize_input(text: str) -> str:
    return "".join(_HTML_ESCAPES.get(ch, ch) for ch in text).strip()


def parse_pomodoro_settings(raw: Any) -> PomodoroSettings | None:
    """
    Stored timer settings, or None when the payload is not a usable dict.
    """
    if not isinstance(raw, dict) or not _POMODORO_KEYS <= raw.keys():
        return None
    try:
        return PomodoroSettings.model_validate(raw, strict=True)
    except ValidationError:
        return None
