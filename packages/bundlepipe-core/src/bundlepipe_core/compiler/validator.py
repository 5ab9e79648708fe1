"""Bundle spec validation for bundlepipe.

Only the fields the compile pipeline itself needs are checked. Bundler
options are passed through untouched so that new bundler flags work
without changes here.
"""

from __future__ import annotations

from bundlepipe_core.errors import ValidationError
from bundlepipe_core.schemas import BundleSpec


def validate_bundle_spec(spec: BundleSpec, index: int | None = None) -> None:
    """Check that a bundle spec names both an entry point and an output.

    Args:
        spec: Bundle spec to validate.
        index: Position of the spec in its request, for error context.

    Raises:
        ValidationError: ``missing src`` or ``missing dst``.

    Example:
        >>> validate_bundle_spec(BundleSpec(src="a"))
        Traceback (most recent call last):
        ...
        bundlepipe_core.errors.ValidationError: missing dst
    """
    if not spec.src:
        raise ValidationError("missing src", field="src", bundle_index=index)
    if not spec.dst:
        raise ValidationError("missing dst", field="dst", bundle_index=index)


def validate_bundle_specs(specs: list[BundleSpec]) -> list[str]:
    """Validate every spec without raising.

    Returns a list of error messages. Empty list means all specs are valid.

    Args:
        specs: Bundle specs to validate.

    Returns:
        Messages of the form ``"bundles[<i>]: missing src"``.
    """
    errors: list[str] = []
    for index, spec in enumerate(specs):
        try:
            validate_bundle_spec(spec, index)
        except ValidationError as e:
            errors.append(f"bundles[{index}]: {e.user_message}")
    return errors
