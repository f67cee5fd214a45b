"""
Общие шаги robust-обёрток: чтение входа и барьер отказов.

Порядок каждой обёртки:
1. required fields → при отсутствии сразу finalize
2. нормализация всех полей (независимо, без short-circuit)
3. есть ошибки → finalize без значения
4. нужное значение отсутствует → finalize без значения, молча
5. вызов детерминированного слоя внутри call_with_fault_barrier
6. finalize со значением и предупреждениями
"""

from typing import Any, Callable, List, Mapping, Optional, TypeVar

from viewfmt.core.log import get_logger
from viewfmt.formatting.errors import FormattingError
from viewfmt.robust.diagnostics import to_error_message
from viewfmt.robust.normalizers import describe_runtime_type

T = TypeVar("T")

logger = get_logger("viewfmt.robust")


def read_input_fields(data: Any, errors: List[str]) -> Mapping[str, Any]:
    """
    Входной mapping robust-обёртки.

    None → пустой mapping (все поля отсутствуют); не-mapping → ошибка.
    """
    if data is None:
        return {}

    if isinstance(data, Mapping):
        return data

    errors.append(
        f'data has unsupported runtime type "{describe_runtime_type(data)}"; expected mapping.'
    )
    return {}


def call_with_fault_barrier(
    function_name: str,
    call: Callable[[], T],
    errors: List[str],
) -> Optional[T]:
    """
    Вызов детерминированного слоя без выпуска исключений наружу.

    Санкционированные отказы (FormattingError) и любые другие исключения
    превращаются в строку "<function_name> raised: <message>." в errors.

    Returns:
        Результат call; None если произошёл отказ
    """
    try:
        return call()
    except FormattingError as e:
        errors.append(f"{function_name} raised: {to_error_message(e)}.")
    except Exception as e:
        logger.debug("unexpected fault in %s", function_name, exc_info=True)
        errors.append(f"{function_name} raised: {to_error_message(e)}.")
    return None
