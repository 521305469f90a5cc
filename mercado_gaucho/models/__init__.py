# Импорт всех моделей, чтобы Base.metadata знала обо всех таблицах
from mercado_gaucho.models.usuario import Usuario, CuentaPersonal, CuentaEmpresa, Direccion, UbicacionUsuario
from mercado_gaucho.models.catalogo import Categoria, Producto, ImagenProducto
from mercado_gaucho.models.carrito import Carrito, CarritoDetalle
from mercado_gaucho.models.orden import Orden, DetalleOrden, Pago, Envio
from mercado_gaucho.models.mensaje import Mensaje
from mercado_gaucho.models.marketing import (
    Promocion, ProductoPromocionado, ProductoDestacado, Banner, TiendaOficial
)
from mercado_gaucho.models.auditoria import InicioSesion, LogActividad, TokenAutenticacion
