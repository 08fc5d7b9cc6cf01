"""
Form Registry - Auto-discovers and manages form definitions.

Scans the forms/ directory for form.json files, validates them against
the rule catalog, and builds ready-to-use FormValidators.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from formvalidator.errors import FormDefinitionError
from formvalidator.logic.rules import RULES, Rule, resolve_rules
from formvalidator.state.field_validator import FieldValidator
from formvalidator.state.form_validator import FormValidator

logger = logging.getLogger(__name__)

# Required keys in form.json
REQUIRED_FORM_KEYS = {"id", "name", "fields"}
REQUIRED_FIELD_KEYS = {"name", "rules"}


class FormDefinition:
    """Parsed and validated form definition from form.json."""

    def __init__(self, config: Dict[str, Any], form_dir: Path):
        self.config = config
        self.form_dir = form_dir

        self.id: str = config["id"]
        self.name: str = config["name"]
        self.description: str = config.get("description", "")

        # Fields, sorted by order (stable for ties)
        self.fields: List[Dict[str, Any]] = sorted(
            config["fields"], key=lambda f: f.get("order", 999)
        )

    @property
    def field_names(self) -> List[str]:
        return [f["name"] for f in self.fields]

    @property
    def sections(self) -> Dict[str, List[str]]:
        """Field names grouped by section, in field order."""
        grouped: Dict[str, List[str]] = {}
        for field in self.fields:
            grouped.setdefault(field.get("section", ""), []).append(field["name"])
        return grouped

    def get_field_by_name(self, name: str) -> Optional[Dict[str, Any]]:
        """Get a field definition by name."""
        for field in self.fields:
            if field["name"] == name:
                return field
        return None

    def get_field_label(self, field_name: str) -> str:
        field = self.get_field_by_name(field_name)
        if field:
            return field.get("label", field_name)
        return field_name

    def rules_for(self, field_name: str) -> List[Rule]:
        """Resolve the rule list for a field, in declared order."""
        field = self.get_field_by_name(field_name)
        if field is None:
            return []
        return resolve_rules(field["rules"])

    def build(self) -> FormValidator:
        """Create a fresh FormValidator with new, empty fields."""
        fields = [
            FieldValidator(self.rules_for(name), name=name)
            for name in self.field_names
        ]
        return FormValidator(fields)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for listings."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "field_count": len(self.fields),
        }


def _validate_form_config(config: Any, path: Path) -> List[str]:
    """Validate a form.json configuration. Returns list of errors."""
    if not isinstance(config, dict):
        return [f"Form config must be a JSON object, got {type(config).__name__}"]

    errors = []

    missing_keys = REQUIRED_FORM_KEYS - set(config.keys())
    if missing_keys:
        errors.append(f"Missing required keys: {sorted(missing_keys)}")

    form_id = config.get("id")
    if "id" in config and (not isinstance(form_id, str) or not form_id):
        errors.append("Form id must be a non-empty string")

    fields = config.get("fields", [])
    if not isinstance(fields, list):
        errors.append(f"Form fields must be a list, got {type(fields).__name__}")
        return errors
    if not fields:
        errors.append("Form must define at least one field")

    field_names = set()
    for i, field in enumerate(fields):
        if not isinstance(field, dict):
            errors.append(f"Field {i} must be an object, got {type(field).__name__}")
            continue

        missing_field_keys = REQUIRED_FIELD_KEYS - set(field.keys())
        if missing_field_keys:
            errors.append(f"Field {i} missing keys: {sorted(missing_field_keys)}")

        name = field.get("name", "")
        if not isinstance(name, str):
            errors.append(f"Field {i} name must be a string")
            continue
        if name in field_names:
            errors.append(f"Duplicate field name: '{name}'")
        field_names.add(name)

        order = field.get("order", 999)
        if not isinstance(order, int) or isinstance(order, bool):
            errors.append(f"Field '{name}' order must be an integer")

        rules = field.get("rules", [])
        if not isinstance(rules, list):
            errors.append(f"Field '{name}' rules must be a list")
            continue
        for rule_name in rules:
            if not isinstance(rule_name, str) or rule_name not in RULES:
                errors.append(f"Field '{name}' uses unknown rule: {rule_name!r}")

    return errors


class FormRegistry:
    """
    Auto-discovers and manages form definitions.

    Usage:
        registry = FormRegistry("/path/to/forms")
        registry.discover()
        form = registry.get_form("signup").build()
    """

    def __init__(self, forms_dir: str = None):
        if forms_dir is None:
            from formvalidator.config.settings import FORMS_DIR
            forms_dir = FORMS_DIR

        self.forms_dir = Path(forms_dir)
        self._forms: Dict[str, FormDefinition] = {}

    def discover(self) -> List[str]:
        """
        Scan forms/ directory for form.json files and load them.

        Returns:
            List of discovered form IDs
        """
        self._forms.clear()

        if not self.forms_dir.exists():
            logger.warning(f"Forms directory not found: {self.forms_dir}")
            return []

        discovered = []

        for form_dir in sorted(self.forms_dir.iterdir()):
            if not form_dir.is_dir():
                continue

            config_path = form_dir / "form.json"
            if not config_path.exists():
                continue

            try:
                with open(config_path, "r", encoding="utf-8") as f:
                    config = json.load(f)

                errors = _validate_form_config(config, config_path)
                if errors:
                    logger.error(f"Invalid form config at {config_path}: {errors}")
                    continue

                form_def = FormDefinition(config, form_dir)
                self._forms[form_def.id] = form_def
                discovered.append(form_def.id)

                logger.info(
                    f"Discovered form: '{form_def.name}' (id={form_def.id}, "
                    f"fields={len(form_def.fields)})"
                )

            except json.JSONDecodeError as e:
                logger.error(f"Invalid JSON in {config_path}: {e}")
            except Exception as e:
                logger.error(f"Error loading form from {form_dir}: {e}")

        logger.info(f"Discovered {len(discovered)} form(s): {discovered}")
        return discovered

    def get_form(self, form_id: str) -> Optional[FormDefinition]:
        """Get a form definition by ID."""
        return self._forms.get(form_id)

    def list_forms(self) -> List[Dict[str, Any]]:
        """List all available forms with summary info."""
        return [form.to_dict() for form in self._forms.values()]

    def register_form(self, config: Dict[str, Any], form_dir) -> FormDefinition:
        """
        Register a form without re-scanning the filesystem.

        Raises:
            FormDefinitionError: If the config does not validate.
        """
        errors = _validate_form_config(config, Path(form_dir))
        if errors:
            raise FormDefinitionError(
                f"Invalid form config: {errors}",
                details={"errors": errors},
            )

        form_def = FormDefinition(config, Path(form_dir))
        self._forms[form_def.id] = form_def
        logger.info(f"Registered form: '{form_def.name}' (id={form_def.id})")
        return form_def

    def unregister_form(self, form_id: str) -> bool:
        """
        Remove a form from the registry (does not delete files).

        Returns:
            True if found and removed, False if not found
        """
        if form_id not in self._forms:
            return False

        del self._forms[form_id]
        logger.info(f"Unregistered form: {form_id}")
        return True

    @property
    def form_count(self) -> int:
        return len(self._forms)

    @property
    def form_ids(self) -> List[str]:
        return list(self._forms.keys())


# Global registry instance
_global_registry: Optional[FormRegistry] = None


def get_registry(forms_dir: str = None) -> FormRegistry:
    """Get or create the global form registry."""
    global _global_registry
    if _global_registry is None:
        _global_registry = FormRegistry(forms_dir)
        _global_registry.discover()
    return _global_registry
