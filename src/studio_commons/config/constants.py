"""Constants and enums for studio-commons.

These correspond to the feature keys and role names stored by the
platform's database.
"""

from enum import Enum
from typing import Final


class FeatureKeys:
    """Feature keys that gate permissions or logins."""
    
    # Core
    MULTI_STUDIO: Final[str] = "core.multi_studio"
    ROOMS: Final[str] = "core.rooms"
    DEVICES: Final[str] = "core.devices"
    SESSIONS: Final[str] = "core.sessions"
    COACHES: Final[str] = "core.coaches"
    
    # Coach
    COACH_PORTAL: Final[str] = "coach.portal"
    COACH_ANALYTICS: Final[str] = "coach.analytics"
    
    # Client
    CLIENT_PORTAL: Final[str] = "client.portal"
    
    # Finance
    POS: Final[str] = "finance.pos"
    RETAIL: Final[str] = "finance.retail"
    INVOICING: Final[str] = "finance.invoicing"
    REPORTS: Final[str] = "finance.reports"
    
    # Marketing
    MARKETING_AUTOMATION: Final[str] = "marketing.automation"
    LEADS_CRM: Final[str] = "marketing.leads_crm"
    
    # Communication
    ANNOUNCEMENTS: Final[str] = "communication.announcements"
    SMS: Final[str] = "communication.sms"
    EMAIL: Final[str] = "communication.email"
    
    # Compliance
    DATA_EXPORT: Final[str] = "compliance.data_export"
    AUDIT_LOGS: Final[str] = "compliance.audit_logs"


class UserRole(str, Enum):
    """Legacy user roles stored on the user record."""
    
    OWNER = "owner"
    TENANT_OWNER = "tenant_owner"
    ADMIN = "admin"
    COACH = "coach"
    CLIENT = "client"


class FeatureSource(str, Enum):
    """Where a tenant's resolved feature state came from."""
    
    OVERRIDE = "override"
    PLAN = "plan"
    DEFAULT = "default"


# Roles whose login depends on a portal feature
PORTAL_FEATURES: Final[dict] = {
    UserRole.CLIENT.value: FeatureKeys.CLIENT_PORTAL,
    UserRole.COACH.value: FeatureKeys.COACH_PORTAL,
}

WILDCARD_SUFFIX: Final[str] = ".*"
