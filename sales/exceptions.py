"""
Rule violations raised by the sale, correction and reset handlers.

The API renders every one of them as ``{"error": message}`` with
``status_code``.
"""


class SaleError(Exception):
    status_code = 400
    default_message = 'No se pudo completar la operación'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class UnknownTeam(SaleError):
    default_message = 'Debes seleccionar un equipo'


class EmptySale(SaleError):
    default_message = 'Debes vender al menos un plato'


class InvalidQuantity(SaleError):
    default_message = 'Las cantidades deben ser números enteros no negativos'


class DishNotFound(SaleError):
    default_message = 'Plato no encontrado'


class InsufficientStock(SaleError):

    def __init__(self, dish):
        self.dish = dish
        super().__init__(f'No hay suficiente stock de {dish.name}')


class InvalidSoldCount(SaleError):
    default_message = 'Cantidad vendida no válida'
