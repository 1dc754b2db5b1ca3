"""
Tutor API — Entity Alert Headers
=================================

What:  Builds the X-<app>-alert / X-<app>-params / X-<app>-error headers
       attached to mutating responses and rejected requests.
Why:   Clients show a notification keyed by the alert text without parsing
       the body.

Header format (application name "tutorApp", entity "tutor"):
    created:   X-tutorApp-alert: tutorApp.tutor.created   X-tutorApp-params: 5
    updated:   X-tutorApp-alert: tutorApp.tutor.updated   X-tutorApp-params: 5
    deleted:   X-tutorApp-alert: tutorApp.tutor.deleted   X-tutorApp-params: 5
    rejected:  X-tutorApp-error: error.idexists           X-tutorApp-params: tutor
"""

import logging
from typing import Dict

from tutor_api.config import settings

logger = logging.getLogger(__name__)


def _alert(message: str, param: str) -> Dict[str, str]:
    app = settings.application_name
    return {
        f"X-{app}-alert": message,
        f"X-{app}-params": param,
    }


def entity_creation_alert(entity_name: str, param: str) -> Dict[str, str]:
    return _alert(f"{settings.application_name}.{entity_name}.created", param)


def entity_update_alert(entity_name: str, param: str) -> Dict[str, str]:
    return _alert(f"{settings.application_name}.{entity_name}.updated", param)


def entity_deletion_alert(entity_name: str, param: str) -> Dict[str, str]:
    return _alert(f"{settings.application_name}.{entity_name}.deleted", param)


def failure_alert(entity_name: str, error_key: str, message: str) -> Dict[str, str]:
    """Headers for a rejected request; the message itself is only logged."""
    app = settings.application_name
    logger.debug("Entity processing failed, %s", message)
    return {
        f"X-{app}-error": f"error.{error_key}",
        f"X-{app}-params": entity_name,
    }
