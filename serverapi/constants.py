"""Path components and request context keys."""

SUPER_TENANT_DOMAIN_NAME = "carbon.super"

# Path components
SERVER_API_PATH_COMPONENT = "/api/server"
TENANT_CONTEXT_PATH_COMPONENT = "/t/{}"
ORGANIZATION_CONTEXT_PATH_COMPONENT = "/o/{}"

# Request context store keys
TENANT_NAME_FROM_CONTEXT = "TenantNameFromContext"
ORGANIZATION_ID_FROM_CONTEXT = "OrganizationIdFromContext"
USERNAME_FROM_CONTEXT = "UsernameFromContext"

ERROR_BUILDING_RESPONSE_MESSAGE = "Error while building response."
