"""
Ошибки численного ядра.

Иерархия:
- InvalidNumber (ValueError) — текст не является неотрицательным десятичным числом
- EmptyInput (InvalidNumber) — значение ещё не введено (пустая строка)
- DivisionByZero (ZeroDivisionError) — нулевой обязательный делитель (цена, знаменатель)

Ошибки никогда не подменяются нулём: вызывающая сторона должна отличать
"не введено" от "введено как 0".
"""


class InvalidNumber(ValueError):
    """
    Текст не удалось разобрать как неотрицательное десятичное число.

    Attributes:
        text: Исходный текст (как передан вызывающей стороной)
        reason: Краткая причина отказа
    """

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid number {text!r}: {reason}")


class EmptyInput(InvalidNumber):
    """Пустой ввод (пустая строка или только пробелы)."""

    def __init__(self, text: str = ""):
        super().__init__(text, "value is empty")


class DivisionByZero(ZeroDivisionError):
    """
    Обязательный делитель равен нулю.

    Нулевая цена токена или нулевой знаменатель комиссии никогда не являются
    валидными параметрами, поэтому операция прерывается, а не возвращает 0.
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"{name} must be non-zero")
