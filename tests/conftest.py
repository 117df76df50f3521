"""Pytest fixtures for m2json tests."""

from __future__ import annotations

from pathlib import Path

import pytest

GROUP_TXT = """\
Group\tWolf Pack
{
\tVnum\t1
\tLeader\t"Alpha Wolf"\t101
\t1\t"Wolf"\t102
\t2\t"Wolf"\t103
}

Group\tNo Vnum
{
\tLeader\t"Orc"\t201
\t1\t"Orc"\t202
}

Group\tNo Leader
{
\tVnum\t3
\t1\t"Orc"\t202
}
"""

SPECIAL_ITEM_GROUP_TXT = """\
Group\tGold Box
{
\tVnum\t50001
\tType\tPCT
\tEffect\t"d:/ymir work/effect/etc/buff/buff_item.mse"
\t1\t돈꾸러미\t1000\t100
\t2\t27001\t5\t60\t10
}

Group\tBroken Drops
{
\tVnum\t50002
\t1\t27002\t1\t100
\t2\tunknown\t1\t100
\t3\t27003\t1\t100
}

Group\tAttr Stone
{
\tVnum\t50003
\tType\tATTR
\t1\t1\t500
\t2\t7
\t3\t2\t300
}
"""

APPLIES_TXT = """\
enum EApplyTypes
{
\tAPPLY_NONE,\t\t\t// 0
\tAPPLY_MAX_HP,\t\t// 1
\tAPPLY_MAX_SP,\t\t// 2
\tAPPLY_CON,
\tAPPLY_INT,
\tAPPLY_SKILL = 10,
\tAPPLY_NORMAL_HIT_DAMAGE_BONUS,
};
"""

APPLY_NAMES_TXT = """\
\t{ "Max HP",\tAPPLY_MAX_HP },
\t{ "Max SP",\tAPPLY_MAX_SP },
\t{ "Vitality",\tAPPLY_CON },
\t{ "Skill",\tAPPLY_SKILL },
"""


@pytest.fixture
def group_text() -> str:
    """Sample group.txt with one valid and two broken blocks."""
    return GROUP_TXT


@pytest.fixture
def special_item_group_text() -> str:
    """Sample special_item_group.txt covering each error policy."""
    return SPECIAL_ITEM_GROUP_TXT


@pytest.fixture
def applies_text() -> str:
    """Apply type enum listing."""
    return APPLIES_TXT


@pytest.fixture
def apply_names_text() -> str:
    """Apply display name table."""
    return APPLY_NAMES_TXT


@pytest.fixture
def input_dir(tmp_path: Path) -> Path:
    """Directory populated with every sample input file."""
    files = {
        "group.txt": GROUP_TXT,
        "special_item_group.txt": SPECIAL_ITEM_GROUP_TXT,
        "applies.txt": APPLIES_TXT,
        "apply_names.txt": APPLY_NAMES_TXT,
    }
    for name, content in files.items():
        (tmp_path / name).write_text(content, encoding="utf-8")
    return tmp_path
