# mercado_gaucho/routers/__init__.py
from mercado_gaucho.routers import (
    usuarios, cuentas_personales, cuentas_empresa, direcciones, ubicaciones_usuario,
    categorias, productos, imagenes_producto,
    carritos, carrito_detalle,
    ordenes, detalle_orden, pagos, envios,
    mensajes,
    promociones, productos_promocionados, productos_destacados, tiendas_oficiales, banners,
    inicios_sesion, logs_actividad, tokens_autenticacion,
)

# Таблица регистрации: (префикс, роутер, тег). Подключается один раз под /api
ROUTES = (
    ("/usuarios", usuarios.router, "Usuarios"),
    ("/cuentas-personales", cuentas_personales.router, "Cuentas personales"),
    ("/cuentas-empresa", cuentas_empresa.router, "Cuentas empresa"),
    ("/direcciones", direcciones.router, "Direcciones"),
    ("/ubicaciones-usuario", ubicaciones_usuario.router, "Ubicaciones"),
    ("/categorias", categorias.router, "Categorías"),
    ("/productos", productos.router, "Productos"),
    ("/imagenes-producto", imagenes_producto.router, "Imágenes de producto"),
    ("/carritos", carritos.router, "Carritos"),
    ("/carrito-detalle", carrito_detalle.router, "Carritos"),
    ("/ordenes", ordenes.router, "Órdenes"),
    ("/detalle-orden", detalle_orden.router, "Órdenes"),
    ("/pagos", pagos.router, "Pagos"),
    ("/envios", envios.router, "Envíos"),
    ("/mensajes", mensajes.router, "Mensajes"),
    ("/promociones", promociones.router, "Marketing"),
    ("/productos-promocionados", productos_promocionados.router, "Marketing"),
    ("/productos-destacados", productos_destacados.router, "Marketing"),
    ("/tiendas-oficiales", tiendas_oficiales.router, "Tiendas oficiales"),
    ("/banners", banners.router, "Marketing"),
    ("/inicios-sesion", inicios_sesion.router, "Auditoría"),
    ("/logs-actividad", logs_actividad.router, "Auditoría"),
    ("/tokens-autenticacion", tokens_autenticacion.router, "Autenticación"),
)
