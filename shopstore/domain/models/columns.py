"""Attribute (column) names shared by the entities and the persistence layer."""

COLUMN_ID = "id"
COLUMN_STATUS = "status"
COLUMN_TITLE = "title"
COLUMN_DESCRIPTION = "description"
COLUMN_SHORT_DESCRIPTION = "short_description"
COLUMN_MEMO = "memo"
COLUMN_METAS = "metas"

COLUMN_PARENT_ID = "parent_id"
COLUMN_CUSTOMER_ID = "customer_id"
COLUMN_ORDER_ID = "order_id"
COLUMN_PRODUCT_ID = "product_id"
COLUMN_ENTITY_ID = "entity_id"

COLUMN_PRICE = "price"
COLUMN_QUANTITY = "quantity"
COLUMN_AMOUNT = "amount"
COLUMN_CODE = "code"
COLUMN_TYPE = "type"
COLUMN_SEQUENCE = "sequence"
COLUMN_MEDIA_URL = "media_url"
COLUMN_MEDIA_TYPE = "media_type"

COLUMN_STARTS_AT = "starts_at"
COLUMN_ENDS_AT = "ends_at"
COLUMN_CREATED_AT = "created_at"
COLUMN_UPDATED_AT = "updated_at"
COLUMN_SOFT_DELETED_AT = "soft_deleted_at"
