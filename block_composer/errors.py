"""Exceptions du block composer.

Seules les violations d'invariants de construction (registry vide, doublon)
et les opérations de page sur un id inexistant lèvent. Tout le reste
(validation, résolution, rendu) s'exprime en valeur de retour.
"""


class BlockComposerError(Exception):
    """Erreur de base du package."""


class RegistryError(BlockComposerError):
    """Registry de blocs incohérent (vide, type dupliqué)."""


class BlockNotFoundError(BlockComposerError, KeyError):
    """Aucun bloc avec cet id dans la page."""

    def __init__(self, block_id: str):
        super().__init__(block_id)
        self.block_id = block_id

    def __str__(self) -> str:
        return f"Bloc introuvable : {self.block_id!r}"


class UnknownTemplateError(BlockComposerError, KeyError):
    """Template de page inconnu."""

    def __init__(self, template_id: str):
        super().__init__(template_id)
        self.template_id = template_id

    def __str__(self) -> str:
        return f"Template inconnu : {self.template_id!r}"
