# mercado_gaucho/core/locales.py
# Сообщения для клиентов API (испанский - язык площадки)

# --- Общие ---
ERROR_INTERNAL = "Error interno del servidor"
ERROR_ROUTE_NOT_FOUND = "Ruta no encontrada."
ERROR_INVALID_INPUT = "Datos de entrada inválidos"
ERROR_NOTHING_TO_UPDATE = "Se requiere al menos un campo para actualizar."
ERROR_METHOD_NOT_ALLOWED_LOG = "Método {method} no permitido para logs de actividad. Los logs son inmutables."
ERROR_METHOD_NOT_ALLOWED_LOGIN = "Método {method} no permitido para registros de inicio de sesión. Los registros son inmutables."
ERROR_DATE_RANGE = "fecha_fin no puede ser anterior a fecha_inicio."
ERROR_INVALID_TOKEN_FORMAT = "Formato de token inválido."
ERROR_INVALID_OR_EXPIRED_TOKEN = "Token inválido o expirado."
ERROR_AUTH_REQUIRED = "Se requiere autenticación."
ERROR_FORBIDDEN = "No tiene permisos para acceder a este recurso."

# --- Ошибки хранилища (значения по умолчанию) ---
ERROR_REFERENCED_ENTITY_NOT_FOUND = "La entidad referenciada no existe."
ERROR_DUPLICATE_VALUE = "Ya existe un registro con esos valores."
ERROR_INVALID_ENUM_VALUE = "Valor proporcionado no es válido."
ERROR_CHECK_VIOLATION = "Los datos no cumplen las restricciones de la base de datos."
ERROR_REQUIRED_VALUE_MISSING = "Falta un valor requerido."
ERROR_DELETE_REFERENCED = "No se puede eliminar: el registro está referenciado por otros datos."

# --- Пользователи и профили ---
ERROR_USER_NOT_FOUND = "Usuario no encontrado."
ERROR_USER_NOT_EXISTS = "El usuario especificado no existe."
ERROR_EMAIL_EXISTS = "El email ya está registrado."
ERROR_USER_HAS_DEPENDENCIES = "No se puede eliminar el usuario, tiene datos asociados (ej: productos, órdenes)."
ERROR_INVALID_USER_TYPE = "Valor proporcionado para tipo_usuario o tipo_cuenta no es válido."
ERROR_PERSONAL_PROFILE_NOT_FOUND = "Perfil personal no encontrado para este usuario."
ERROR_PERSONAL_PROFILE_EXISTS = "Ya existe un perfil personal para este usuario."
ERROR_INVALID_GENDER = "Valor proporcionado para género no es válido."
ERROR_BUSINESS_PROFILE_NOT_FOUND = "Perfil de empresa no encontrado para este usuario."
ERROR_BUSINESS_PROFILE_EXISTS = "Ya existe un perfil de empresa para este usuario."
ERROR_ADDRESS_NOT_FOUND = "Dirección no encontrada."
ERROR_LOCATION_NOT_FOUND = "Ubicación no encontrada."

# --- Каталог ---
ERROR_CATEGORY_NOT_FOUND = "Categoría no encontrada."
ERROR_CATEGORY_EXISTS = "Ya existe una categoría con ese nombre."
ERROR_CATEGORY_IN_USE = "No se puede eliminar la categoría, tiene productos asociados."
ERROR_PRODUCT_NOT_FOUND = "Producto no encontrado."
ERROR_PRODUCT_REFS = "El usuario (vendedor) o la categoría especificada no existe."
ERROR_PRODUCT_IN_USE = "No se puede eliminar el producto, está referenciado en órdenes."
ERROR_INVALID_PRODUCT_STATE = "Estado inválido. Debe ser \"nuevo\" o \"usado\"."
ERROR_IMAGE_NOT_FOUND = "Imagen no encontrada."
ERROR_PRODUCT_NOT_EXISTS = "El producto especificado no existe."

# --- Корзина ---
ERROR_CART_NOT_FOUND = "Carrito no encontrado."
ERROR_CART_NOT_FOUND_FOR_USER = "Carrito no encontrado para este usuario. Puede crearse uno nuevo."
ERROR_CART_ITEM_NOT_FOUND = "Detalle de carrito no encontrado."
ERROR_CART_OR_PRODUCT_NOT_EXISTS = "El carrito o producto especificado no existe."

# --- Заказы ---
ERROR_ORDER_NOT_FOUND = "Orden no encontrada."
ERROR_ORDER_REFS = "El usuario o uno de los productos especificados no existe."
ERROR_INVALID_ORDER_STATE = "Valor proporcionado para estado de la orden no es válido."
ERROR_INVALID_ORDER_ITEM = "Detalle de orden inválido en la posición {posicion}: {motivo}"
ERROR_ORDER_TRANSITION = "Transición de estado no permitida: {actual} -> {nuevo}."
ERROR_ORDER_ITEM_NOT_FOUND = "Detalle de orden no encontrado."
ERROR_ORDER_OR_PRODUCT_NOT_EXISTS = "La orden o el producto especificado no existe."
ERROR_PAYMENT_NOT_FOUND = "Pago no encontrado."
ERROR_ORDER_NOT_EXISTS = "La orden especificada no existe."
ERROR_INVALID_PAYMENT_STATE = "Valor proporcionado para estado_pago no es válido."
ERROR_SHIPMENT_NOT_FOUND = "Envío no encontrado."
ERROR_SHIPMENT_NOT_FOUND_FOR_ORDER = "Envío no encontrado para esta orden."
ERROR_SHIPMENT_EXISTS = "Ya existe un envío para esta orden."
ERROR_INVALID_SHIPMENT_STATE = "Valor proporcionado para estado_envio no es válido."

# --- Сообщения ---
ERROR_MESSAGE_NOT_FOUND = "Mensaje no encontrado."
ERROR_MESSAGE_ALREADY_ANSWERED = "El mensaje ya fue respondido."
ERROR_MESSAGE_REFS = "El emisor, receptor o producto especificado no existe."

# --- Маркетинг ---
ERROR_PROMOTION_NOT_FOUND = "Promoción no encontrada."
ERROR_PROMOTION_CODE_NOT_FOUND = "Promoción no encontrada o inactiva para el código proporcionado."
ERROR_PROMOTION_CODE_EXISTS = "El código de promoción ya existe."
ERROR_PROMOTED_NOT_FOUND = "Relación producto-promoción no encontrada."
ERROR_PROMOTED_EXISTS = "Este producto ya está asociado a esta promoción."
ERROR_PRODUCT_OR_PROMOTION_NOT_EXISTS = "El producto o la promoción especificada no existe."
ERROR_FEATURED_NOT_FOUND = "Producto destacado no encontrado."
ERROR_FEATURED_NOT_FOUND_FOR_PRODUCT = "Este producto no está destacado."
ERROR_INVALID_FEATURED_TYPE = "Valor proporcionado para tipo_destacado no es válido."
ERROR_BANNER_NOT_FOUND = "Banner no encontrado."
ERROR_STORE_NOT_FOUND = "Tienda oficial no encontrada."
ERROR_STORE_NOT_FOUND_FOR_USER = "Este usuario no tiene una tienda oficial."
ERROR_STORE_USER_EXISTS = "Este usuario ya tiene una tienda oficial."
ERROR_STORE_NAME_EXISTS = "El nombre de la tienda ya está en uso."
ERROR_INVALID_STORE_STATE = "Valor proporcionado para estado de la tienda no es válido."

# --- Аудит и токены ---
ERROR_LOGIN_RECORD_NOT_FOUND = "Registro de inicio de sesión no encontrado."
ERROR_ACTIVITY_LOG_NOT_FOUND = "Log de actividad no encontrado."
ERROR_TOKEN_NOT_FOUND = "Token no encontrado."
ERROR_TOKEN_EXISTS = "El token proporcionado ya existe."

# --- Сообщения об успехе ---
SUCCESS_TOKENS_DELETED = "{count} token(s) eliminados para el usuario {id_usuario}."
SUCCESS_DB_OK = "Conexión a la base de datos OK"
ERROR_DB_UNAVAILABLE = "No se pudo conectar a la base de datos."
