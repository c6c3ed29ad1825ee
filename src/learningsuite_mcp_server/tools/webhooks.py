"""Tools for webhook subscriptions."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from learningsuite_mcp_server.client import LearningSuiteClient
from learningsuite_mcp_server.tooling import ToolDefinition, ToolParameters
from learningsuite_mcp_server.tools.common import NoParams, api_tool

WebhookEventType = Literal[
    "community-post-commented-events",
    "community-post-created-events",
    "community-post-moderated-events",
    "course-member-added-events",
    "course-updated-events",
    "custom-popup-interaction-events",
    "exam-completed-events",
    "exam-graded-events",
    "feedback-events",
    "group-user-access-changed-events",
    "lesson-completed-events",
    "new-login-events",
    "progress-changed-events",
]


class CreateSubscriptionParams(ToolParameters):
    """Parameters for learningsuite_create_webhook_subscription."""

    url: str = Field(description="Webhook URL")
    events: list[str] = Field(description="Array of event types to subscribe to")
    secret: str | None = Field(default=None, description="Webhook secret")


class SubscriptionParams(ToolParameters):
    """Parameters that only identify a subscription."""

    subscription_id: str = Field(description="Subscription ID")


class UpdateSubscriptionParams(SubscriptionParams):
    """Parameters for learningsuite_update_webhook_subscription."""

    url: str | None = Field(default=None, description="Webhook URL")
    events: list[str] | None = Field(default=None, description="Array of event types")
    secret: str | None = Field(default=None, description="Webhook secret")
    enabled: bool | None = Field(default=None, description="Enable/disable webhook")


class SampleDataParams(ToolParameters):
    event_type: WebhookEventType = Field(description="Event type")


def webhook_tools(client: LearningSuiteClient) -> list[ToolDefinition]:
    """Webhook subscription CRUD and sample payload retrieval."""
    return [
        api_tool(
            client,
            "learningsuite_list_webhook_subscriptions",
            "Get all webhook subscriptions",
            NoParams,
            "list_webhook_subscriptions",
        ),
        api_tool(
            client,
            "learningsuite_create_webhook_subscription",
            "Create a webhook subscription",
            CreateSubscriptionParams,
            "create_webhook_subscription",
        ),
        api_tool(
            client,
            "learningsuite_get_webhook_subscription",
            "Get a webhook subscription by ID",
            SubscriptionParams,
            "get_webhook_subscription",
        ),
        api_tool(
            client,
            "learningsuite_update_webhook_subscription",
            "Update a webhook subscription",
            UpdateSubscriptionParams,
            "update_webhook_subscription",
        ),
        api_tool(
            client,
            "learningsuite_delete_webhook_subscription",
            "Delete a webhook subscription",
            SubscriptionParams,
            "delete_webhook_subscription",
        ),
        api_tool(
            client,
            "learningsuite_get_webhook_sample_data",
            "Get sample data for a webhook event type",
            SampleDataParams,
            "get_webhook_sample_data",
        ),
    ]
