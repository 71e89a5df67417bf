"""
Built-in machine catalog.

Each entry is a :class:`~app.catalog.machine_profile.MachineInfo`.  The
catalog is a read-only lookup table for the planner: its *order* is part
of the routine contract (the deterministic shuffle runs over it), so new
machines must be appended, never inserted.

To add a machine, call :func:`register_machine` at import time.
"""

from __future__ import annotations

from app.catalog.machine_profile import LoadScheme, MachineInfo
from app.schemas.workout import PrimaryGroup

# ======================================================================
# Catalog storage
# ======================================================================

MACHINE_CATALOG: dict[str, MachineInfo] = {}

DEFAULT_ICON = "MachineIcons/Leg_Press"


def register_machine(info: MachineInfo) -> None:
    """Register a machine in the global catalog."""
    MACHINE_CATALOG[info.machine_id] = info


def all_machines() -> list[MachineInfo]:
    """All machines in registration order."""
    return list(MACHINE_CATALOG.values())


def get_machine(machine_id: str) -> MachineInfo | None:
    """Look up a machine by its id.  Returns ``None`` if not found."""
    return MACHINE_CATALOG.get(machine_id)


def equivalents_for(machine_id: str) -> list[MachineInfo]:
    """Machines training the same group as *machine_id* (itself included)."""
    info = get_machine(machine_id)
    if info is None:
        return []
    return [m for m in MACHINE_CATALOG.values() if m.group == info.group]


def group_for(machine_id: str, default: PrimaryGroup = PrimaryGroup.CHEST) -> PrimaryGroup:
    info = get_machine(machine_id)
    return info.group if info else default


def display_name_for(machine_id: str) -> str:
    info = get_machine(machine_id)
    return info.display_name if info else machine_id


def english_name_for(machine_id: str) -> str:
    info = get_machine(machine_id)
    return info.english_name if info else machine_id


def description_for(machine_id: str) -> str:
    info = get_machine(machine_id)
    return info.description if info else ""


def icon_for(machine_id: str) -> str:
    info = get_machine(machine_id)
    return info.icon_name if info else DEFAULT_ICON


# ======================================================================
# Helpers
# ======================================================================

# Aliases for brevity in the table below
PL = LoadScheme.PLATE_LOADED
ST = LoadScheme.STACK
CH = PrimaryGroup.CHEST
BK = PrimaryGroup.BACK
SH = PrimaryGroup.SHOULDERS
LG = PrimaryGroup.LEGS
CV = PrimaryGroup.CALVES
AR = PrimaryGroup.ARMS
CO = PrimaryGroup.CORE


def _machine(machine_id: str, display_name: str, group: PrimaryGroup, description: str,
             scheme: LoadScheme = ST, increment: float | None = 5.0) -> MachineInfo:
    return MachineInfo(
        machine_id=machine_id,
        display_name=display_name,
        english_name=machine_id,
        icon_name="MachineIcons/" + machine_id.replace(" ", "_"),
        group=group,
        description=description,
        load_scheme=scheme,
        stack_increment_kg=increment,
    )


# ======================================================================
# Built-in machines
# ======================================================================

_MACHINES: list[MachineInfo] = [
    # ── Chest ─────────────────────────────────────────────────────
    _machine("Chest Press", "坐姿胸推", CH, "锻炼胸大肌整体，增强推力"),
    _machine("Pec Deck", "蝴蝶机夹胸", CH, "孤立锻炼胸大肌中缝"),
    _machine("Incline Chest Press", "上斜胸推", CH, "侧重上胸部肌肉"),
    _machine("Cable Fly", "绳索夹胸", CH, "全程保持胸肌张力，修饰胸型", increment=2.5),

    # ── Back ──────────────────────────────────────────────────────
    _machine("Lat Pulldown", "高位下拉", BK, "锻炼背阔肌宽度"),
    _machine("Seated Row", "坐姿划船", BK, "锻炼背部厚度与中下斜方肌"),
    _machine("High Row", "坐姿高位划船", BK, "侧重背阔肌下部与大圆肌", PL),
    _machine("Rear Delt Fly", "反向飞鸟机", BK, "锻炼三角肌后束"),

    # ── Shoulders ─────────────────────────────────────────────────
    _machine("Shoulder Press", "坐姿肩推", SH, "锻炼三角肌前束与中束"),
    _machine("Lateral Raise", "侧平举机", SH, "孤立锻炼三角肌中束，增加肩宽", increment=2.5),
    _machine("Reverse Shoulder Press", "反向肩推", SH, "辅助肩部与上胸训练"),

    # ── Legs ──────────────────────────────────────────────────────
    _machine("Leg Press", "腿举", LG, "大重量复合动作，刺激腿部整体", PL),
    _machine("Leg Extension", "腿伸展", LG, "孤立锻炼股四头肌"),
    _machine("Leg Curl", "腿弯举", LG, "孤立锻炼股二头肌"),
    _machine("Glute Bridge", "臀桥机", LG, "针对臀大肌的孤立训练", PL),
    _machine("Hip Abductor", "髋外展", LG, "锻炼臀中肌与大腿外侧"),
    _machine("Hip Adductor", "髋内收", LG, "锻炼大腿内侧肌群"),

    # ── Calves ────────────────────────────────────────────────────
    _machine("Calf Raise", "坐姿提踵", CV, "锻炼小腿三头肌", PL),

    # ── Arms ──────────────────────────────────────────────────────
    _machine("Cable Pushdown", "绳索下压", AR, "孤立锻炼肱三头肌", increment=2.5),
    _machine("Biceps Curl", "二头弯举机", AR, "孤立锻炼肱二头肌"),
    _machine("Triceps Extension", "三头伸展机", AR, "针对肱三头肌长头"),
    _machine("Reverse Curl", "反握弯举机", AR, "锻炼前臂与肱肌"),

    # ── Core ──────────────────────────────────────────────────────
    _machine("Ab Crunch", "腹肌卷腹机", CO, "锻炼腹直肌"),
]

# Auto-register all built-in machines
for _m in _MACHINES:
    register_machine(_m)
