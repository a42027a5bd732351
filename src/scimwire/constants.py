USER_SCHEMA = "urn:ietf:params:scim:schemas:core:2.0:User"
GROUP_SCHEMA = "urn:ietf:params:scim:schemas:core:2.0:Group"
RESOURCE_TYPE_SCHEMA = "urn:ietf:params:scim:schemas:core:2.0:ResourceType"
SERVICE_PROVIDER_CONFIG_SCHEMA = "urn:ietf:params:scim:schemas:core:2.0:ServiceProviderConfig"
ENTERPRISE_USER_SCHEMA = "urn:ietf:params:scim:schemas:extension:enterprise:2.0:User"
SCHEMA_SCHEMA = "urn:ietf:params:scim:schemas:core:2.0:Schema"
ERROR_SCHEMA = "urn:ietf:params:scim:api:messages:2.0:Error"


EMAIL_TYPES = ("work", "home", "other")
ADDRESS_TYPES = ("work", "home", "other")
PHONE_NUMBER_TYPES = ("work", "home", "mobile", "fax", "pager", "other")
IM_TYPES = ("aim", "gtalk", "icq", "xmpp", "msn", "skype", "qq", "yahoo")
PHOTO_TYPES = ("photo", "thumbnail")
GROUP_MEMBERSHIP_TYPES = ("direct", "indirect")
MEMBER_TYPES = ("User", "Group")
AUTHENTICATION_SCHEME_TYPES = (
    "oauth",
    "oauth2",
    "oauthbearertoken",
    "httpbasic",
    "httpdigest",
)

ATTRIBUTE_TYPES = (
    "string",
    "boolean",
    "decimal",
    "integer",
    "dateTime",
    "binary",
    "reference",
    "complex",
)
ATTRIBUTE_MUTABILITY = ("readOnly", "readWrite", "immutable", "writeOnly")
ATTRIBUTE_RETURNED = ("always", "never", "default", "request")
ATTRIBUTE_UNIQUENESS = ("none", "server", "global")
