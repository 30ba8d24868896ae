"""Resolution of ``__include__`` references against the manifest."""

from typing import Any, Dict, List, Optional, Tuple

from ..manifest import Manifest
from ..utils.errors import IncludeError, ValidationError
from ..utils.logging_config import LoggerMixin

INCLUDE_KEY = "__include__"

Target = Tuple[str, str]


def qualified_key(owner: str, name: str) -> str:
    return f"{owner}.{name}"


def normalize_refs(refs: Any, owner: str) -> List[Target]:
    """Turn include references into ``(owner, rule_name)`` targets.

    Accepted forms: ``"rule"`` (local to ``owner``), ``("other", "rule")``,
    ``{"owner": "other", "rule": "rule"}`` or a list mixing them.
    """
    if isinstance(refs, (str, tuple, dict)):
        refs = [refs]
    if not isinstance(refs, list):
        raise ValidationError(
            f"Invalid {INCLUDE_KEY} value: expected a rule name or a list of references",
            details={"value": repr(refs)},
        )

    targets = []
    for ref in refs:
        if isinstance(ref, str):
            targets.append((owner, ref))
        elif isinstance(ref, (tuple, list)) and len(ref) == 2:
            targets.append((str(ref[0]), str(ref[1])))
        elif isinstance(ref, dict) and "owner" in ref and "rule" in ref:
            targets.append((str(ref["owner"]), str(ref["rule"])))
        else:
            raise ValidationError(
                f"Invalid include reference {ref!r}: use 'rule', (owner, rule) "
                "or {'owner': ..., 'rule': ...}",
                details={"value": repr(ref)},
            )
    return targets


class IncludeResolver(LoggerMixin):
    """Merges included rules into a declaration map.

    Included rules are merged in list order with last-wins replacement of
    whole property values, then the including declarations are applied on
    top. Includes of included rules are resolved relative to the owner of
    the rule that declares them. Include cycles raise ``IncludeError``.
    """

    def __init__(self, manifest: Manifest):
        self.manifest = manifest

    def resolve(
        self, declarations: Dict[str, Any], owner: str, rule: Optional[str] = None
    ) -> Dict[str, Any]:
        stack = [qualified_key(owner, rule)] if rule else []
        return self._resolve(declarations, owner, stack)

    def _resolve(
        self, declarations: Dict[str, Any], owner: str, stack: List[str]
    ) -> Dict[str, Any]:
        own = {key: value for key, value in declarations.items() if key != INCLUDE_KEY}
        refs = declarations.get(INCLUDE_KEY)
        if not refs:
            return own

        merged: Dict[str, Any] = {}
        for target_owner, target_name in normalize_refs(refs, owner):
            key = qualified_key(target_owner, target_name)
            if key in stack:
                cycle = " -> ".join(stack + [key])
                raise IncludeError(
                    f"Include cycle detected: {cycle}",
                    rule_name=target_name,
                    owner=target_owner,
                    details={"cycle": stack + [key]},
                )

            style_class = self.manifest.get_class(key)
            if style_class is None:
                raise IncludeError(
                    f"Included rule '{target_name}' not found in '{target_owner}'. "
                    f"Make sure '{target_owner}' defines '{target_name}' and is "
                    "compiled before rules that include it.",
                    rule_name=target_name,
                    owner=target_owner,
                )

            self.logger.debug("Resolving include", extra={"include": key})
            merged.update(
                self._resolve(dict(style_class.declarations), target_owner, stack + [key])
            )

        merged.update(own)
        return merged
