"""The user guide describing the simulator's controls."""

from __future__ import annotations

_TITLE = (
    "Ce programme va simuler l'intéraction entre la Terre et la Lune "
    "de manière réaliste."
)

_SPECIAL_KEYS = (
    ("F1", "Diminuer la vitesse de la Lune"),
    ("F2", "Augmenter la vitesse de la Lune"),
    ("F3", "Diminuer la masse de la Terre"),
    ("F4", "Augmenter la masse de la Terre"),
    ("F5", "Diminuer la masse de la Lune"),
    ("F6", "Augmenter la masse de la Lune"),
)

_OTHER_KEYS = (
    ("n", "Réinitialiser le système"),
    ("s", "Entrer dans/Quitter le mode schéma"),
)


def guide_text() -> str:
    """Return the guide as plain text, one line per entry."""
    lines = [
        _TITLE,
        "",
        "Vous pouvez modifier certaines caractéristiques du système "
        "grâce aux touches suivantes: ",
        "",
        *(f"    {key} : {action}" for key, action in _SPECIAL_KEYS),
        "",
        "Voici d'autres fonctionnalités disponibles: ",
        "",
        *(f"    {key} : {action}" for key, action in _OTHER_KEYS),
        "",
        "Les touches directionnelles vous permettent de vous déplacer.",
    ]
    return "\n".join(lines)