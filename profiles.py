from __future__ import annotations
import logging
from pathlib import Path
from typing import List, Optional
from uuid import uuid4
from pydantic import BaseModel, Field, ValidationError
from models import AppState, Plan
from paths import snapshot_dir
from storage import data_path, load_json, save_json


logger = logging.getLogger(__name__)

INDEX_FILE = "profiles.json"
DEFAULT_PROFILE = "default"
_PLAN_VALUES = {p.value for p in Plan}


class ProfileEntry(BaseModel):
    name: str
    key: str = Field(default_factory=lambda: uuid4().hex)


class ProfileIndex(BaseModel):
    """
    Display names mapped to snapshot files. The index is the source of truth
    for names; snapshot file names are opaque keys.
    """
    profiles: List[ProfileEntry] = Field(default_factory=list)

    def find(self, name: str) -> Optional[ProfileEntry]:
        return next((e for e in self.profiles if e.name == name), None)


def _snapshot_path(entry: ProfileEntry) -> Path:
    return snapshot_dir() / f"{entry.key}.json"


def _read_index() -> ProfileIndex:
    raw = load_json(data_path(INDEX_FILE), {})
    if not isinstance(raw, dict):
        logger.warning("Profile index is not an object, rebuilding")
        return ProfileIndex()
    try:
        return ProfileIndex.model_validate(raw)
    except ValidationError as e:
        logger.warning("Profile index failed validation (%d errors), rebuilding", e.error_count())
        return ProfileIndex()


def _write_index(index: ProfileIndex) -> None:
    save_json(data_path(INDEX_FILE), index.model_dump(mode="json"))


def _adopt_orphans(index: ProfileIndex) -> bool:
    # snapshots present on disk but missing from the index keep their key as name
    known = {e.key for e in index.profiles}
    adopted = False
    for path in sorted(snapshot_dir().glob("*.json")):
        if path.stem not in known:
            logger.info("Adopting unindexed snapshot %s", path.name)
            index.profiles.append(ProfileEntry(name=path.stem, key=path.stem))
            adopted = True
    return adopted


def _current_index() -> ProfileIndex:
    index = _read_index()
    changed = _adopt_orphans(index)
    if not index.profiles:
        index.profiles.append(ProfileEntry(name=DEFAULT_PROFILE))
        changed = True
    if changed:
        _write_index(index)
    return index


def _entry_for(name: str) -> ProfileEntry:
    index = _current_index()
    entry = index.find(name)
    if entry is None:
        entry = ProfileEntry(name=name)
        index.profiles.append(entry)
        _write_index(index)
    return entry


def _coerce_plan(raw: dict) -> dict:
    # snapshots written before billing existed, or by a newer tier, read as free
    if raw.get("plan") not in _PLAN_VALUES:
        raw = {**raw, "plan": Plan.FREE.value}
    return raw


def list_profiles() -> List[str]:
    return [e.name for e in _current_index().profiles]


def load_profile(profile_name: str) -> AppState:
    entry = _entry_for(profile_name)
    raw = load_json(_snapshot_path(entry), {})
    if not isinstance(raw, dict) or not raw:
        return AppState(profile=profile_name)
    try:
        state = AppState.model_validate(_coerce_plan(raw))
    except ValidationError as e:
        logger.warning(
            "Profile %r failed validation (%d errors), resetting",
            profile_name, e.error_count(),
        )
        state = AppState(profile=profile_name)
        save_profile(profile_name, state)
    state.profile = profile_name
    return state


def save_profile(profile_name: str, state: AppState) -> None:
    state.profile = profile_name
    save_json(_snapshot_path(_entry_for(profile_name)), state.model_dump(mode="json"))


def create_profile(profile_name: str) -> AppState:
    name = profile_name.strip()
    if not name:
        raise ValueError("Profile name cannot be empty.")
    if any(n.lower() == name.lower() for n in list_profiles()):
        raise ValueError("Profile already exists.")

    state = AppState(profile=name)
    save_profile(name, state)
    return state


def delete_profile(profile_name: str) -> None:
    index = _current_index()
    entry = index.find(profile_name)
    if entry is None:
        return
    _snapshot_path(entry).unlink(missing_ok=True)
    index.profiles.remove(entry)
    _write_index(index)
    logger.info("Deleted profile %r", profile_name)


def set_plan(profile_name: str, plan: Plan) -> AppState:
    """
    Change the stored plan tier of a profile (billing / profile update path).
    """
    state = load_profile(profile_name)
    if state.plan != plan:
        logger.info("Profile %r plan %s -> %s", profile_name, state.plan.value, plan.value)
        state.plan = plan
        save_profile(profile_name, state)
    return state
