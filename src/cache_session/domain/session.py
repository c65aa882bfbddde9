"""Model de sessão — Session.

Session é o handle que circula entre o resolver (leitura) e o persister
(escrita) durante uma única request.
- Um id vazio significa "ainda sem identificador"
- `changed` é o dirty flag, marcado pelos helpers de mutação
- `regenerated` indica pedido explícito de rotação do identificador
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

# Chave reservada para a duração do cookie definida em runtime.
SESSION_LIFETIME_KEY = "__SESSION_TTL__"


class Session(BaseModel):
    """Estado de sessão carregado do cache.

    Responsabilidades:
    - Expor o bag associativo de dados
    - Rastrear mutação (changed) e pedido de rotação (regenerated)
    - Carregar a duração do cookie por sessão (persist_for)
    """

    id: str = ""
    data: dict[str, Any] = Field(default_factory=dict)
    changed: bool = False
    regenerated: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Retorna uma cópia dos dados da sessão."""
        return dict(self.data)

    def get(self, name: str, default: Any = None) -> Any:
        return self.data.get(name, default)

    def has(self, name: str) -> bool:
        return name in self.data

    def set(self, name: str, value: Any) -> None:  # noqa: A003
        """Armazena um valor e marca a sessão como alterada."""
        self.data[name] = value
        self.changed = True

    def unset(self, name: str) -> None:
        if name in self.data:
            del self.data[name]
            self.changed = True

    def clear(self) -> None:
        if self.data:
            self.data.clear()
            self.changed = True

    def regenerate(self) -> Session:
        """Marca a sessão para rotação do identificador no próximo persist."""
        self.regenerated = True
        return self

    def persist_for(self, duration: int) -> None:
        """Define a duração (segundos) do cookie para esta sessão.

        O valor tem precedência sobre a flag global `persistent`, inclusive
        quando é 0 (cookie de sessão do navegador).
        """
        self.set(SESSION_LIFETIME_KEY, duration)

    @property
    def has_lifetime(self) -> bool:
        return SESSION_LIFETIME_KEY in self.data

    @property
    def session_lifetime(self) -> int:
        """Duração definida via persist_for, ou 0 se ausente."""
        return int(self.data.get(SESSION_LIFETIME_KEY, 0) or 0)
