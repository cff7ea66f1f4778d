"""
Party — Идентичность участника леджера

Immutable Pydantic модель: имя участника и его owning key.
Owning key — непрозрачный идентификатор публичного ключа, которым участник
подписывает транзакции. Набор подписантов транзакции состоит из таких ключей.
"""

from pydantic import BaseModel, Field

# Непрозрачный идентификатор публичного ключа
PublicKey = str


class Party(BaseModel):
    """
    Участник леджера (эмитент или держатель).

    Immutable (frozen=True) и hashable: используется как ключ группировки
    при подсчёте сумм по эмитентам.
    """

    name: str = Field(..., min_length=1, description="Имя участника (например, 'O=Alice, L=London, C=GB')")
    owning_key: PublicKey = Field(..., min_length=1, description="Публичный ключ, которым участник подписывает")

    model_config = {"frozen": True}

    def sort_key(self) -> tuple[str, str]:
        """Детерминированный ключ сортировки (не зависит от порядка хэширования)."""
        return (self.name, self.owning_key)
