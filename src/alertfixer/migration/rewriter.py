"""
Replacement text for a migrated alert call.
"""

from __future__ import annotations

from typing import Optional

from .fields import ExtractedFields

ALERT_CONTROLLER_CALL = "[UIAlertController showAlertInViewController:self"
TAP_BLOCK_SIGNATURE = (
    "^(UIAlertController * _Nonnull alertView, UIAlertAction * _Nonnull action, NSInteger buttonIndex)"
)


def build_replacement(
    leading_whitespace: str,
    fields: ExtractedFields,
    callback_body: Optional[str],
    *,
    newline: str = "\n",
) -> str:
    head = (
        f"{leading_whitespace}{ALERT_CONTROLLER_CALL} withTitle:{fields.title} message:{fields.message} "
        f"cancelButtonTitle:{fields.cancel_label} destructiveButtonTitle:nil "
        f"otherButtonTitles:{fields.other_labels} tapBlock:"
    )
    if callback_body is None:
        return f"{head}nil];"
    return f"{head}{TAP_BLOCK_SIGNATURE} {{{newline}{callback_body}{leading_whitespace}}}];"


__all__ = ["ALERT_CONTROLLER_CALL", "TAP_BLOCK_SIGNATURE", "build_replacement"]
