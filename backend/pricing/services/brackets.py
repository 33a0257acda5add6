"""
Quantity brackets for prep pricing

Bracket labels on a pricing rule ("<50", "50+", "1001+", ...) are not
self-describing: "50+" means 50 to 100 units for FBM. This module loads the
bounds for every label from a JSON configuration file, validates them and
answers which bracket (and which package) a unit count falls into.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from ..types import CUSTOM_RANGE, Package, PrepService

logger = logging.getLogger(__name__)


class BracketConfigError(Exception):
    """Base exception for quantity bracket configuration errors"""
    pass


class ConfigurationError(BracketConfigError):
    """Raised when the configuration file cannot be read or parsed"""
    pass


class BracketValidationError(BracketConfigError):
    """Raised when the configuration is structurally invalid"""
    pass


@dataclass(frozen=True)
class QuantityBracket:
    label: str
    package: str
    min_units: int
    max_units: Optional[int] = None

    def contains(self, units: int) -> bool:
        if units < self.min_units:
            return False
        return self.max_units is None or units <= self.max_units


def load_bracket_config(config_path: str = None) -> dict:
    """
    Load quantity brackets from a JSON configuration file

    Args:
        config_path: Path to the JSON file. If None, uses the bundled default.

    Returns:
        dict: Parsed configuration

    Raises:
        ConfigurationError: If the file cannot be loaded or parsed
    """
    if config_path is None:
        config_path = Path(__file__).parent.parent / "config" / "quantity_brackets.json"

    try:
        config_path = Path(config_path)
        if not config_path.exists():
            raise ConfigurationError(f"Quantity bracket configuration file not found: {config_path}")

        with open(config_path, 'r', encoding='utf-8') as f:
            config = json.load(f)

        logger.info(f"Loaded quantity brackets from {config_path}")
        return config

    except ConfigurationError:
        raise
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in quantity bracket file: {e}")
    except Exception as e:
        raise ConfigurationError(f"Error loading quantity bracket configuration: {e}")


def validate_bracket_config(config: dict) -> List[str]:
    """
    Validate that the bracket configuration is complete and consistent

    Returns:
        List[str]: Validation errors (empty if valid)
    """
    errors = []

    for key in ('version', 'services'):
        if key not in config:
            errors.append(f"Missing required top-level key: {key}")

    services = config.get('services')
    if services is None:
        return errors
    if not isinstance(services, dict):
        errors.append("'services' must be a dictionary")
        return errors

    for service in PrepService:
        if service.value not in services:
            errors.append(f"Missing brackets for service: {service.value}")

    known_packages = {p.value for p in Package}
    for service, brackets in services.items():
        if service not in {s.value for s in PrepService}:
            errors.append(f"Unknown service: {service}")
        if not isinstance(brackets, list) or not brackets:
            errors.append(f"Brackets for '{service}' must be a non-empty list")
            continue
        errors.extend(_validate_service_brackets(service, brackets, known_packages))

    if not errors:
        logger.debug("Quantity bracket validation passed")
    else:
        logger.warning(f"Quantity bracket validation found {len(errors)} errors")

    return errors


def parse_brackets(config: dict) -> Dict[str, List[QuantityBracket]]:
    """Turn a validated configuration into QuantityBracket lists keyed by service."""
    parsed = {}
    for service, rows in config['services'].items():
        parsed[service] = sorted(
            (
                QuantityBracket(
                    label=row['label'],
                    package=row['package'],
                    min_units=int(row['min_units']),
                    max_units=None if row.get('max_units') is None else int(row['max_units']),
                )
                for row in rows
            ),
            key=lambda b: b.min_units,
        )
    return parsed


def get_brackets() -> Dict[str, List[QuantityBracket]]:
    """Get the cached bracket table, loading and validating it on first use"""
    if not hasattr(get_brackets, '_cached_brackets'):
        config = load_bracket_config(_configured_path())
        validation_errors = validate_bracket_config(config)
        if validation_errors:
            logger.error(f"Quantity bracket validation failed: {validation_errors}")
            raise BracketValidationError(f"Quantity bracket validation failed: {validation_errors}")
        get_brackets._cached_brackets = parse_brackets(config)

    return get_brackets._cached_brackets


def clear_bracket_cache():
    """Clear the cached bracket table (tests and config reloads)"""
    if hasattr(get_brackets, '_cached_brackets'):
        delattr(get_brackets, '_cached_brackets')


def find_bracket(service: str, label: str, brackets: Dict[str, List[QuantityBracket]] = None) -> Optional[QuantityBracket]:
    table = get_brackets() if brackets is None else brackets
    for bracket in table.get(service, []):
        if bracket.label == label:
            return bracket
    return None


def is_quantity_in_range(service: str, label: str, units: int, brackets: Dict[str, List[QuantityBracket]] = None) -> bool:
    """True when `units` falls in the bracket named `label` for `service`."""
    if label == CUSTOM_RANGE:
        return True
    bracket = find_bracket(service, label, brackets)
    if bracket is None:
        logger.debug(f"Unknown quantity range '{label}' for service {service}")
        return False
    return bracket.contains(units)


def package_for_quantity(service: str, units: int, brackets: Dict[str, List[QuantityBracket]] = None) -> Optional[str]:
    """Package a unit count belongs to, or None for an unknown service."""
    table = get_brackets() if brackets is None else brackets
    for bracket in table.get(service, []):
        if bracket.contains(units):
            return bracket.package
    return None


# Private helpers

def _configured_path() -> Optional[str]:
    from django.conf import settings

    return getattr(settings, 'PRICING_BRACKETS_PATH', None)


def _validate_service_brackets(service: str, brackets: list, known_packages: set) -> List[str]:
    errors = []
    previous_max = None
    rows = []

    for index, row in enumerate(brackets):
        if not isinstance(row, dict):
            errors.append(f"Bracket {index} for '{service}' must be a dictionary")
            continue
        missing = [k for k in ('label', 'package', 'min_units') if k not in row]
        if missing:
            errors.append(f"Bracket {index} for '{service}' is missing {', '.join(missing)}")
            continue
        if row['package'] not in known_packages:
            errors.append(f"Unknown package '{row['package']}' in '{service}'")
        max_units = row.get('max_units')
        if max_units is not None and max_units < row['min_units']:
            errors.append(f"Bracket '{row['label']}' for '{service}' has max_units below min_units")
        rows.append(row)

    labels = [row['label'] for row in rows]
    if len(labels) != len(set(labels)):
        errors.append(f"Duplicate bracket labels for '{service}'")

    for row in sorted(rows, key=lambda r: r['min_units']):
        if previous_max is False:
            errors.append(f"Bracket '{row['label']}' for '{service}' follows an open-ended bracket")
        elif previous_max is not None and row['min_units'] <= previous_max:
            errors.append(f"Bracket '{row['label']}' for '{service}' overlaps the previous bracket")
        previous_max = False if row.get('max_units') is None else row['max_units']

    return errors
