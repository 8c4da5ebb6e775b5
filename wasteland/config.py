"""
Default puzzle configuration for the Haunted Wasteland solver.
Node names and suffixes used by both parts, plus walk limits.
"""

from typing import Any, Dict

PUZZLE_CONFIG = {
    # Part 1
    "start_node": "AAA",
    "end_node": "ZZZ",

    # Part 2
    "start_suffix": "A",
    "end_suffix": "Z",

    # Input format
    "name_length": 3,  # Every node name has exactly 3 characters

    # Walk limits (None = walk until the matcher is satisfied)
    "max_steps": None,
}


def get_config(**overrides) -> Dict[str, Any]:
    """Return a copy of the default configuration with overrides applied."""
    unknown = set(overrides) - set(PUZZLE_CONFIG)
    if unknown:
        raise ValueError(f"Unknown configuration keys: {sorted(unknown)}")
    config = dict(PUZZLE_CONFIG)
    config.update(overrides)
    return config


def validate_puzzle_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate configuration and return errors/warnings.

    Args:
        config: Configuration to validate

    Returns:
        Dictionary with validation results
    """
    validation = {
        "valid": True,
        "warnings": [],
        "errors": [],
    }

    name_length = config.get("name_length", 3)
    for key in ("start_node", "end_node"):
        name = config.get(key)
        if not isinstance(name, str) or len(name) != name_length:
            validation["errors"].append(f"{key} must be a {name_length}-character name, got {name!r}")

    for key in ("start_suffix", "end_suffix"):
        suffix = config.get(key)
        if not isinstance(suffix, str) or not suffix:
            validation["errors"].append(f"{key} must be a non-empty string, got {suffix!r}")
        elif len(suffix) > name_length:
            validation["errors"].append(f"{key} is longer than a node name: {suffix!r}")

    max_steps = config.get("max_steps")
    if max_steps is not None:
        if not isinstance(max_steps, int) or max_steps <= 0:
            validation["errors"].append(f"max_steps must be a positive integer or None, got {max_steps!r}")
        elif max_steps < 1000:
            validation["warnings"].append(f"Low max_steps ({max_steps}) may stop real puzzle walks early")

    validation["valid"] = not validation["errors"]
    if not validation["valid"]:
        return validation

    if not config["start_node"].endswith(config["start_suffix"]):
        validation["warnings"].append("start_node does not end with start_suffix")
    if not config["end_node"].endswith(config["end_suffix"]):
        validation["warnings"].append("end_node does not end with end_suffix")

    return validation


if __name__ == "__main__":
    print("Haunted Wasteland Puzzle Configuration")
    print("=" * 60)
    for key, value in PUZZLE_CONFIG.items():
        print(f"  {key:.<30} {value!r}")

    validation = validate_puzzle_config(PUZZLE_CONFIG)
    if validation["warnings"]:
        print("\nWarnings:")
        for warning in validation["warnings"]:
            print(f"  ⚠ {warning}")
    print(f"\nValid: {validation['valid']}")
