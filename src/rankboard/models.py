from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from typing import Any

from .view import RankedEntity

PAYLOAD_FIELDS = ("store_name", "profile_url", "image_url", "popularity")


class RankingRecord(BaseModel):
    """One account as delivered by the ranking dataset"""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: int | str = Field(description="Stable identifier of the account")
    account_name: str = Field(
        description="Account handle, shown as @name",
        validation_alias=AliasChoices("accountName", "username", "account_name"),
        serialization_alias="accountName",
    )
    followers: int = Field(description="Follower count used as the ranking key")
    region: str | None = Field(
        default=None,
        description=(
            "Region the account belongs to; empty means uncategorized. "
            "Read from `region` or `area`, always written as `region`"
        ),
        validation_alias=AliasChoices("region", "area"),
    )
    store_name: str | None = Field(
        default=None,
        description="Store or display name",
        validation_alias=AliasChoices("storeName", "store_name"),
        serialization_alias="storeName",
    )
    profile_url: str | None = Field(
        default=None,
        description="Link to the account profile",
        validation_alias=AliasChoices("profileUrl", "profile_url"),
        serialization_alias="profileUrl",
    )
    image_url: str | None = Field(
        default=None,
        description="Avatar image",
        validation_alias=AliasChoices("imageUrl", "avatar", "image_url"),
        serialization_alias="imageUrl",
    )
    popularity: int | float | None = Field(
        default=None, description="Auxiliary popularity score"
    )

    @classmethod
    def field_keys(cls) -> set[str]:
        """Every key that populates a declared field: names and their aliases."""
        keys: set[str] = set()
        for name, info in cls.model_fields.items():
            keys.add(name)
            alias = info.validation_alias
            if isinstance(alias, AliasChoices):
                keys.update(choice for choice in alias.choices if isinstance(choice, str))
            elif isinstance(alias, str):
                keys.add(alias)
        return keys

    def to_entity(self) -> RankedEntity:
        payload: dict[str, Any] = {}
        for name in PAYLOAD_FIELDS:
            value = getattr(self, name)
            if value is not None:
                payload[name] = value
        if self.model_extra:
            # A second spelling of a declared field (username next to
            # accountName) is not payload.
            field_keys = self.field_keys()
            payload.update(
                (key, value)
                for key, value in self.model_extra.items()
                if key not in field_keys
            )
        return RankedEntity(
            id=self.id,
            display_name=self.account_name,
            metric_value=self.followers,
            category=self.region or None,
            payload=payload,
        )

    @classmethod
    def from_entity(cls, entity: RankedEntity) -> "RankingRecord":
        field_keys = cls.field_keys()
        extra = {
            key: value
            for key, value in entity.payload.items()
            if key in PAYLOAD_FIELDS or key not in field_keys
        }
        return cls(
            id=entity.id,
            account_name=entity.display_name,
            followers=entity.metric_value,
            region=entity.category,
            **extra,
        )

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class RankingPayload(BaseModel):
    """Dataset envelope; a bare list of records is accepted as well"""

    items: list[RankingRecord] = Field(description="Ranked accounts")

    @classmethod
    def from_data(cls, data: Any) -> "RankingPayload":
        if isinstance(data, list):
            data = {"items": data}
        return cls.model_validate(data)

    def to_entities(self) -> list[RankedEntity]:
        return [record.to_entity() for record in self.items]
