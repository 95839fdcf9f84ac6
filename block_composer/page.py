"""
Page — liste ordonnée de blocs, possédée exclusivement par la page.

Toutes les éditions remplacent un champ entier du bloc (props, link,
visibility, animation, style) : l'ancien objet Block est remplacé dans la
liste par une copie, jamais modifié en place. La fusion d'un patch partiel
reste à la charge de la couche formulaire.
"""
import copy
import json
import logging
from collections import Counter
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError

from .blocks.models import Block, BlockVisibility, new_block_id
from .errors import BlockNotFoundError
from .links.resolver import is_active
from .registry import REGISTRY, BlockTypeRegistry
from .templates import PageTemplate, expand

log = logging.getLogger(__name__)

EXPORT_VERSION = "1.0"

# Champs d'un bloc remplaçables par replace_field
REPLACEABLE_FIELDS = ("props", "link", "visibility", "animation", "style")


class Page(BaseModel):
    id: str = Field(default_factory=lambda: f"page-{new_block_id()[6:]}")
    name: str = "Untitled"
    slug: str = ""
    blocks: List[Block] = Field(default_factory=list)
    is_home_page: bool = False

    # ── Accès ───────────────────────────────────────────────────────────────

    def index_of(self, block_id: str) -> int:
        for i, block in enumerate(self.blocks):
            if block.id == block_id:
                return i
        raise BlockNotFoundError(block_id)

    def get_block(self, block_id: str) -> Block:
        return self.blocks[self.index_of(block_id)]

    # ── Édition de la liste ─────────────────────────────────────────────────

    def add_block(self, block_type: str, position: Optional[int] = None,
                  registry: BlockTypeRegistry = REGISTRY) -> Block:
        """Ajoute un bloc neuf (defaults du registry), en fin de page par défaut."""
        block = registry.create_block(block_type)
        if position is None:
            self.blocks.append(block)
        else:
            self.blocks.insert(position, block)
        return block

    def remove_block(self, block_id: str) -> Block:
        return self.blocks.pop(self.index_of(block_id))

    def move_block(self, block_id: str, offset: int) -> int:
        """Déplace un bloc de `offset` positions (bornées aux extrémités). Retourne le nouvel index."""
        i = self.index_of(block_id)
        j = max(0, min(len(self.blocks) - 1, i + offset))
        if i != j:
            self.blocks.insert(j, self.blocks.pop(i))
        return j

    def duplicate_block(self, block_id: str) -> Block:
        """Copie profonde avec un id neuf, insérée juste après la source."""
        i = self.index_of(block_id)
        clone = self.blocks[i].model_copy(deep=True, update={"id": new_block_id()})
        self.blocks.insert(i + 1, clone)
        return clone

    def replace_field(self, block_id: str, field: str, value: Any) -> Block:
        if field not in REPLACEABLE_FIELDS:
            raise ValueError(f"Champ non remplaçable : {field!r}")
        i = self.index_of(block_id)
        current = self.blocks[i]
        data = {name: getattr(current, name) for name in Block.model_fields if name != field}
        data[field] = copy.deepcopy(value)
        block = Block.model_validate(data)
        self.blocks[i] = block
        return block

    def toggle_visibility(self, block_id: str, viewport: str) -> Block:
        block = self.get_block(block_id)
        current = block.visibility or BlockVisibility()
        return self.replace_field(block_id, "visibility", current.toggled(viewport))

    def load_template(self, template: PageTemplate) -> List[Block]:
        """Remplace tous les blocs par l'expansion du template."""
        self.blocks = expand(template)
        log.info("Template %s chargé sur la page %s (%d blocs)", template.id, self.id, len(self.blocks))
        return self.blocks

    # ── Link manager ────────────────────────────────────────────────────────

    def linked_blocks(self, kind: Optional[str] = None) -> List[Block]:
        """Blocs portant un lien actif, éventuellement filtrés par type de lien."""
        out = [b for b in self.blocks if is_active(b.link)]
        if kind is not None:
            out = [b for b in out if b.link.kind == kind]
        return out

    def link_counts(self) -> Dict[str, int]:
        return dict(Counter(b.link.kind for b in self.linked_blocks()))


# ── Export / import JSON ────────────────────────────────────────────────────

def export_block(block: Block) -> str:
    return json.dumps(block.to_data(), indent=2, ensure_ascii=False)


def export_blocks(blocks: List[Block]) -> str:
    payload = {
        "version": EXPORT_VERSION,
        "blocks": [b.to_data() for b in blocks],
        "exportedAt": datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
    }
    return json.dumps(payload, indent=2, ensure_ascii=False)


def _fresh(data: Any) -> Optional[Block]:
    if not isinstance(data, dict) or not data.get("type"):
        return None
    try:
        return Block.model_validate({**data, "id": new_block_id()})
    except ValidationError as e:
        log.warning("Bloc importé invalide (%s) : %s", data.get("type"), e.error_count())
        return None


def import_block(raw: str) -> Optional[Block]:
    """Un bloc exporté → Block avec id neuf ; None si le JSON est inexploitable."""
    try:
        data = json.loads(raw)
    except (TypeError, ValueError):
        return None
    if not isinstance(data, dict) or not data.get("id"):
        return None
    return _fresh(data)


def import_blocks(raw: str) -> Optional[List[Block]]:
    """Enveloppe {version, blocks, exportedAt} → blocs avec ids neufs ; None si malformé."""
    try:
        data = json.loads(raw)
    except (TypeError, ValueError):
        return None
    if not isinstance(data, dict) or not isinstance(data.get("blocks"), list):
        return None
    blocks = [_fresh(b) for b in data["blocks"]]
    if any(b is None for b in blocks):
        return None
    return blocks
