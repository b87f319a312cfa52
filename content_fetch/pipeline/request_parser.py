from collections.abc import Mapping, Sequence

from content_fetch.pipeline.exceptions import SaveRequestValidationError
from content_fetch.pipeline.models import Priority, Recipient, SaveRequest


def normalize_recipients(
    users: Sequence[Mapping[str, object]] | None,
    user_id: str | None,
    folder: str | None,
) -> tuple[Recipient, ...]:
    """Fold the legacy single-user fields into a uniform recipient list.

    The single ``userId`` field takes precedence over ``users`` when both are
    present.

    Raises:
        SaveRequestValidationError: if no recipient can be resolved.
    """
    if user_id:
        return (Recipient(user_id=user_id, folder=folder),)

    recipients: list[Recipient] = []
    for user in users or []:
        if not isinstance(user, Mapping):
            raise SaveRequestValidationError(f"recipient must be an object, got {user!r}")
        uid = user.get("id")
        if not isinstance(uid, str) or not uid:
            raise SaveRequestValidationError(f"recipient without a user id: {dict(user)}")
        user_folder = user.get("folder")
        recipients.append(
            Recipient(
                user_id=uid,
                folder=user_folder if isinstance(user_folder, str) else None,
            )
        )
    if not recipients:
        raise SaveRequestValidationError("save request has no recipients")
    return tuple(recipients)


def parse_save_request(payload: Mapping[str, object], default_source: str) -> SaveRequest:
    """Decode an inbound request body (camelCase keys) into a SaveRequest.

    Recipients are passed through unresolved; the pipeline folds and checks
    them so that a request without recipients is still reported.

    Raises:
        SaveRequestValidationError: if a required field is missing or invalid.
    """
    url = _required_str(payload, "url")
    save_request_id = _required_str(payload, "saveRequestId")
    priority_raw = _required_str(payload, "priority")
    try:
        priority = Priority(priority_raw.lower())
    except ValueError as exc:
        raise SaveRequestValidationError(f"invalid priority '{priority_raw}'") from exc

    users = payload.get("users")
    if users is not None and not isinstance(users, list):
        raise SaveRequestValidationError("'users' must be a list")

    labels = payload.get("labels")
    if labels is not None and not isinstance(labels, list):
        raise SaveRequestValidationError("'labels' must be a list")

    return SaveRequest(
        url=url,
        save_request_id=save_request_id,
        priority=priority,
        source=_optional_str(payload, "source") or default_source,
        users=tuple(users or ()),
        user_id=_optional_str(payload, "userId"),
        folder=_optional_str(payload, "folder"),
        state=_optional_str(payload, "state"),
        labels=tuple(str(label) for label in labels) if labels is not None else None,
        task_id=_optional_str(payload, "taskId"),
        locale=_optional_str(payload, "locale"),
        timezone=_optional_str(payload, "timezone"),
        rss_feed_url=_optional_str(payload, "rssFeedUrl"),
        saved_at=_optional_str(payload, "savedAt"),
        published_at=_optional_str(payload, "publishedAt"),
    )


def _required_str(payload: Mapping[str, object], key: str) -> str:
    value = payload.get(key)
    if not isinstance(value, str) or not value.strip():
        raise SaveRequestValidationError(f"'{key}' is required")
    return value


def _optional_str(payload: Mapping[str, object], key: str) -> str | None:
    value = payload.get(key)
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise SaveRequestValidationError(f"'{key}' must be a string")
    return value
