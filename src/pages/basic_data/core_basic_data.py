"""
Owner profile ("datos básicos"): a single backend record with names, dates,
greetings, contact e-mail and social network links.

Social links accept a bare handle, a host-prefixed path or a full URL and are
normalised to a full ``https://`` URL before saving.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from src.pages.forms_common import FormMessages, clean_text, require_fields

MESSAGES = FormMessages(
    created="Datos guardados",
    updated="Datos guardados",
    create_failed="No se pudo guardar la información",
    update_failed="No se pudo guardar la información",
    load_failed="No se pudieron cargar los datos básicos",
)

TEXT_FIELDS = (
    "firstName",
    "othersName",
    "firstSurName",
    "othersSurName",
    "dateBirth",
    "located",
    "locatedEng",
    "startWorkingDate",
    "greeting",
    "greetingEng",
    "email",
    "instagram",
    "linkedin",
    "x",
    "github",
    "description",
    "descriptionEng",
)
REQUIRED_FIELDS = {
    "firstName": "Nombre",
    "firstSurName": "Apellido",
    "dateBirth": "Fecha de nacimiento",
    "located": "Ubicación",
    "locatedEng": "Ubicación (inglés)",
    "startWorkingDate": "Fecha de inicio laboral",
    "greeting": "Saludo",
    "greetingEng": "Saludo (inglés)",
    "email": "Correo",
    "description": "Descripción",
    "descriptionEng": "Descripción (inglés)",
}
INVALID_EMAIL_MESSAGE = "Ingresa un correo válido"

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_SCHEME_RE = re.compile(r"^https?://", re.IGNORECASE)


@dataclass(frozen=True)
class SocialNetwork:
    label: str
    base: str

    @property
    def host(self) -> str:
        return _SCHEME_RE.sub("", self.base).rstrip("/")

    @property
    def domain(self) -> str:
        domain = self.host.split("/")[0]
        return domain[4:] if domain.startswith("www.") else domain

    @property
    def allowed_prefixes(self) -> Tuple[str, ...]:
        return tuple(
            f"{scheme}://{www}{self.domain}" for scheme in ("https", "http") for www in ("", "www.")
        )


SOCIAL_NETWORKS: Dict[str, SocialNetwork] = {
    "instagram": SocialNetwork("Instagram", "https://instagram.com/"),
    "linkedin": SocialNetwork("LinkedIn", "https://www.linkedin.com/in/"),
    "x": SocialNetwork("X", "https://x.com/"),
    "github": SocialNetwork("GitHub", "https://github.com/"),
}


def normalize_social_link(value: Any, network: SocialNetwork) -> str:
    trimmed = clean_text(value)
    if not trimmed:
        return ""
    if _SCHEME_RE.match(trimmed):
        return trimmed
    lowered = trimmed.lower()
    if lowered.startswith("www."):
        return f"https://{trimmed}"
    for host in (network.host, network.domain):
        if lowered == host or lowered.startswith(f"{host}/"):
            return f"https://{trimmed}"
    return f"{network.base}{trimmed.lstrip('/')}"


def validate_social_link(value: Any, network: SocialNetwork) -> None:
    normalized = normalize_social_link(value, network)
    if not normalized:
        return
    if not _SCHEME_RE.match(normalized):
        raise ValueError("El valor debe tener http(s) al inicio")
    lowered = normalized.lower()
    if not any(lowered.startswith(prefix) for prefix in network.allowed_prefixes):
        raise ValueError(f"{network.label}: la URL debe comenzar con {network.domain}")


def build_basic_data_payload(values: Dict[str, Any]) -> Dict[str, str]:
    require_fields(values, REQUIRED_FIELDS)
    if not _EMAIL_RE.match(clean_text(values.get("email"))):
        raise ValueError(INVALID_EMAIL_MESSAGE)
    payload = {field: clean_text(values.get(field)) for field in TEXT_FIELDS}
    for field, network in SOCIAL_NETWORKS.items():
        validate_social_link(payload[field], network)
        payload[field] = normalize_social_link(payload[field], network)
    return payload


def basic_data_form_state(record: Dict[str, Any]) -> Dict[str, str]:
    return {field: clean_text(record.get(field)) for field in TEXT_FIELDS}
