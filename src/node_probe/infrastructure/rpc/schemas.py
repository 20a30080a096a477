"""Schemas for node JSON-RPC results."""

from pydantic import BaseModel, ConfigDict, Field


class SystemHealth(BaseModel):
    """Result of the node's system_health call."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    is_syncing: bool = Field(..., alias="isSyncing", description="Node is syncing")
    peers: int = Field(..., ge=0, description="Connected peer count")
    should_have_peers: bool = Field(
        ..., alias="shouldHavePeers", description="Node expects to have peers"
    )
