"""Client-facing messages of the Product resource."""

INVALID_ID = "ID no válido"
NAME_REQUIRED = "El nombre del producto no puede ir vacío"
PRICE_NOT_NUMBER = "El precio del producto debe ser un número"
PRICE_REQUIRED = "El precio del producto no puede ir vacío"
PRICE_NOT_POSITIVE = "El precio del producto debe ser mayor de 0"
AVAILABILITY_INVALID = "Valor para disponibilidad no válido"

PRODUCT_NOT_FOUND = "Producto no encontrado"
PRODUCT_DELETED = "Producto eliminado"
