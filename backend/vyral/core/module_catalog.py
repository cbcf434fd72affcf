"""Module Catalog — display metadata for the navigation modules (local fallback + lookup).

Invariants:
    - LOCAL_MODULES is always available; a remote catalog only replaces it wholesale
    - find_module matches id, module_key, key or route_name, trimmed and case-insensitive
    - ModuleCard is display data only; nothing in the ledger reads it

Design Decisions:
    - module_from_record accepts both snake_case and camelCase keys: the remote table
      is shared with a JS client that writes camelCase
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ModuleCard:
    id: str
    key: str
    title: str
    description: str
    icon: str
    route_name: str
    action_label: str
    long_description: str = ""
    action_copy: str = ""

    @property
    def module_key(self) -> str:
        return self.key

    def as_dict(self) -> dict[str, str]:
        return {
            "id": self.id,
            "key": self.key,
            "module_key": self.module_key,
            "title": self.title,
            "description": self.description,
            "long_description": self.long_description,
            "icon": self.icon,
            "route_name": self.route_name,
            "action_label": self.action_label,
            "action_copy": self.action_copy,
        }


def _pick(record: dict, *names: str, default: str = "") -> str:
    for name in names:
        value = record.get(name)
        if value:
            return str(value)
    return default


def module_from_record(record: dict) -> ModuleCard:
    """Build a ModuleCard from a loosely-shaped catalog row."""
    key = _pick(record, "module_key", "moduleKey", "key", "name", "id")
    return ModuleCard(
        id=_pick(record, "id", default=key.lower()),
        key=key,
        title=_pick(record, "title", "name", default=key),
        description=_pick(record, "description", "summary"),
        long_description=_pick(record, "long_description", "longDescription"),
        icon=_pick(record, "icon"),
        route_name=_pick(record, "route_name", "routeName", "route", default=key),
        action_label=_pick(record, "action_label", "actionLabel"),
        action_copy=_pick(record, "action_copy", "actionCopy"),
    )


def find_module(modules: list[ModuleCard], key: str | None) -> ModuleCard | None:
    if not key:
        return None
    needle = key.strip().lower()
    for module in modules:
        identifiers = (module.id, module.module_key, module.key, module.route_name)
        if any(i and i.strip().lower() == needle for i in identifiers):
            return module
    return None


LOCAL_MODULES: tuple[ModuleCard, ...] = (
    ModuleCard(
        id="core", key="Core", title="Core Command",
        description="Mission control and operational intelligence.",
        long_description=(
            "Coordinate mission-critical operations from a single command center. "
            "Monitor performance, triage issues, and keep every initiative aligned."
        ),
        icon="flash-outline", route_name="Core", action_label="Launch Core",
        action_copy="Simulate a core systems sync to keep the command deck humming.",
    ),
    ModuleCard(
        id="zone", key="Zone", title="Zone Intelligence",
        description="Spatial analytics and live command zones.",
        long_description=(
            "Drop into geospatial overviews, track live deployments, and keep "
            "field teams in perfect formation."
        ),
        icon="planet-outline", route_name="Zone", action_label="Launch Zone",
        action_copy="Ping the latest coordinates and synchronize the tactical overlay.",
    ),
    ModuleCard(
        id="tree", key="Tree", title="Tree Atlas",
        description="Organizational mapping and lineage tracking.",
        long_description=(
            "Visualize reporting paths, succession plans, and team relationships with clarity."
        ),
        icon="git-branch-outline", route_name="Tree", action_label="Launch Tree",
        action_copy="Render the newest org branches and highlight emerging connections.",
    ),
    ModuleCard(
        id="board", key="Board", title="Board Metrics",
        description="Strategic dashboards and visualization.",
        long_description=(
            "Unify KPIs, surface insights, and keep leadership informed with "
            "real-time dashboards."
        ),
        icon="grid-outline", route_name="Board", action_label="Launch Board",
        action_copy="Spin up the latest strategic report and broadcast the signal.",
    ),
    ModuleCard(
        id="stryke", key="Stryke", title="Stryke Ops",
        description="Revenue acceleration and sales orchestration.",
        long_description=(
            "Arm your sellers with playbooks, automate follow-ups, and orchestrate "
            "every strike point."
        ),
        icon="rocket-outline", route_name="Stryke", action_label="Launch Stryke",
        action_copy="Ignite a sales sequence and rally the revenue squad.",
    ),
    ModuleCard(
        id="skrybe", key="Skrybe", title="Skrybe Forge",
        description="Narrative studio for collaborative lore and story drops.",
        long_description=(
            "Spin up serialized story worlds, draft collaborative chapters, and keep "
            "the lore canon synced across every squad."
        ),
        icon="create-outline", route_name="Skrybe", action_label="Launch Skrybe",
        action_copy="Open the narrative forge and publish a new neon chronicle.",
    ),
    ModuleCard(
        id="lyfe", key="Lyfe", title="Lyfe Pulse",
        description="Wellness quests with adaptive rituals and streaks.",
        long_description=(
            "Track vibes, unlock resilience quests, and align check-ins that keep "
            "every creator balanced and energized."
        ),
        icon="heart-outline", route_name="Lyfe", action_label="Launch Lyfe",
        action_copy="Initiate a wellness pulse and log a new resilience ritual.",
    ),
    ModuleCard(
        id="vshop", key="Vshop", title="Vshop Arena",
        description="Drop hub for digital merch, experiences, and unlocks.",
        long_description=(
            "Curate neon drops, bundle virtual meetups, and manage fan commerce "
            "funnels with cinematic flair."
        ),
        icon="bag-handle-outline", route_name="Vshop", action_label="Launch Vshop",
        action_copy="Preview the next merch cascade and ready the hype signals.",
    ),
)
