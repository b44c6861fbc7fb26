"""
Switch Normalizer

Feature-switch registry snapshot -> {camelCaseName: isOn}, client-exposed
switches only.

COLLISIONS:
===========
Two switches that normalize to the same key would silently overwrite
each other's state. That is a configuration defect and raises
SwitchCollisionError instead.
"""

from __future__ import annotations
import logging
from typing import Dict, Iterable

from ..contracts.base import SwitchCollisionError
from ..contracts.sources import Switch
from .casing import camel_case_from_hyphenated


logger = logging.getLogger(__name__)


def _check_collision(seen: Dict[str, str], key: str, switch: Switch):
    if key in seen:
        logger.error(
            "Switch %r collides with %r on client key %r", switch.name, seen[key], key
        )
        raise SwitchCollisionError(
            context=(("key", key), ("first", seen[key]), ("second", switch.name))
        )
    seen[key] = switch.name


def normalize_switches(switches: Iterable[Switch]) -> Dict[str, bool]:
    result: Dict[str, bool] = {}
    seen: Dict[str, str] = {}
    hidden = 0

    for switch in switches:
        if not switch.expose_client_side:
            hidden += 1
            continue
        key = camel_case_from_hyphenated(switch.name)
        _check_collision(seen, key, switch)
        result[key] = switch.is_switched_on

    logger.debug("Exposing %d switches, %d kept server-side", len(result), hidden)
    return result


def validate_switch_registry(switches: Iterable[Switch]) -> None:
    """
    Check every switch, exposed or not, for key collisions.

    Intended for application start-up and tests, so that flipping a switch
    to client-exposed can never introduce a collision at request time.
    """
    seen: Dict[str, str] = {}
    for switch in switches:
        _check_collision(seen, camel_case_from_hyphenated(switch.name), switch)
