"""Validate a raw `.apibuilder/config` mapping before anything is fetched."""

from __future__ import annotations

from dataclasses import dataclass, field

from apibuilder_sync.config import KNOWN_SETTINGS, TARGET_KINDS


@dataclass
class ValidationResult:
    """Result of a config validation run."""

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    total_projects: int = 0
    total_targets: int = 0

    @property
    def passed(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = [
            f"Config Validation: {self.total_projects} projects, "
            f"{self.total_targets} targets checked"
        ]
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  {w}")
        if self.passed and not self.warnings:
            lines.append("All checks passed.")
        return "\n".join(lines)


def _check_target(result: ValidationResult, where: str, target) -> None:
    result.total_targets += 1
    if isinstance(target, dict):
        if not target.get("path"):
            result.errors.append(f"{where}: target mapping missing 'path'")
        kind = target.get("type")
        if kind is not None and kind not in TARGET_KINDS:
            result.errors.append(
                f"{where}: invalid target type '{kind}' "
                f"(valid: {', '.join(sorted(TARGET_KINDS))})"
            )
    elif not isinstance(target, str) or not target.strip():
        result.errors.append(f"{where}: target must be a non-empty path, got {target!r}")


def _check_targets(result: ValidationResult, where: str, targets) -> None:
    if targets is None or targets == []:
        result.warnings.append(f"{where}: no targets configured")
        return
    for target in targets if isinstance(targets, list) else [targets]:
        _check_target(result, where, target)


def _check_generators(result: ValidationResult, where: str, generators) -> None:
    if generators is None:
        result.errors.append(f"{where}: missing 'generators'")
        return

    if isinstance(generators, dict):
        if not generators:
            result.warnings.append(f"{where}: no generators configured")
        for name, targets in generators.items():
            _check_targets(result, f"{where} [{name}]", targets)
        return

    if not isinstance(generators, list):
        result.errors.append(f"{where}: 'generators' must be a mapping or a list")
        return

    if not generators:
        result.warnings.append(f"{where}: no generators configured")
    for i, entry in enumerate(generators):
        if not isinstance(entry, dict) or not entry.get("generator"):
            result.errors.append(f"{where}: generator entry #{i + 1} missing 'generator'")
            continue
        name = entry["generator"]
        if "targets" in entry:
            _check_targets(result, f"{where} [{name}]", entry["targets"])
        elif "type" in entry:
            _check_target(
                result, f"{where} [{name}]",
                {"path": entry.get("target"), "type": entry["type"]},
            )
        else:
            _check_targets(result, f"{where} [{name}]", entry.get("target"))


def validate_config(data: dict) -> ValidationResult:
    """Run structural validation on a config mapping.

    Checks:
    - `settings` is a mapping of known keys with boolean values
    - `code` maps org -> application -> {version, generators}
    - every generator has at least one well-formed target
    - explicit target types are "file" or "directory"

    Args:
        data: Parsed YAML mapping.

    Returns:
        ValidationResult with errors and warnings.
    """
    result = ValidationResult()

    settings = data.get("settings")
    if settings is not None:
        if not isinstance(settings, dict):
            result.errors.append("settings: must be a mapping")
        else:
            for key, value in settings.items():
                if key not in KNOWN_SETTINGS:
                    result.warnings.append(f"settings: unknown key '{key}'")
                elif not isinstance(value, bool):
                    result.errors.append(f"settings: '{key}' must be true or false")

    code = data.get("code")
    if code is None:
        result.errors.append("missing 'code' section")
        return result
    if not isinstance(code, dict):
        result.errors.append("code: must be a mapping of organizations")
        return result

    for org, apps in code.items():
        if not isinstance(apps, dict):
            result.errors.append(f"{org}: must be a mapping of applications")
            continue
        for app_name, app_data in apps.items():
            result.total_projects += 1
            where = f"{org}/{app_name}"
            if not isinstance(app_data, dict):
                result.errors.append(f"{where}: must be a mapping")
                continue
            if app_data.get("version") in (None, ""):
                result.errors.append(f"{where}: missing 'version'")
            _check_generators(result, where, app_data.get("generators"))

    return result
