"""Built-in feature restriction table for the studio platform.

Feature key -> permission patterns / keys. Permissions listed here are only
granted while the owning feature is enabled for the tenant. Anything not
listed is a core permission and always allowed.
"""

from types import MappingProxyType

from ....config.constants import FeatureKeys
from .restriction import FeatureRestrictionMap


FEATURE_PERMISSION_MAP = MappingProxyType({
    # Core
    FeatureKeys.MULTI_STUDIO: ("studio.*",),
    FeatureKeys.ROOMS: ("room.*",),
    FeatureKeys.DEVICES: ("device.*",),
    FeatureKeys.SESSIONS: ("session.*",),
    
    # Coach
    # coach.portal gates login, not permissions
    FeatureKeys.COACH_ANALYTICS: ("coach.performance.view",),
    
    # Finance
    FeatureKeys.POS: ("finance.pos.*",),
    FeatureKeys.RETAIL: ("finance.product.*", "finance.inventory.*"),
    FeatureKeys.INVOICING: ("finance.invoice.*",),
    FeatureKeys.REPORTS: ("finance.report.*",),
    
    # Marketing
    FeatureKeys.MARKETING_AUTOMATION: ("marketing.automation.*", "marketing.campaign.*"),
    FeatureKeys.LEADS_CRM: ("marketing.lead.*",),
    
    # Communication
    FeatureKeys.ANNOUNCEMENTS: ("communication.announcement.*",),
    FeatureKeys.SMS: ("communication.sms.*",),
    FeatureKeys.EMAIL: ("communication.email.*",),
    
    # Compliance
    FeatureKeys.DATA_EXPORT: ("compliance.export.*",),
    FeatureKeys.AUDIT_LOGS: ("compliance.audit.*",),
})

DEFAULT_RESTRICTIONS = FeatureRestrictionMap.from_mapping(FEATURE_PERMISSION_MAP)
