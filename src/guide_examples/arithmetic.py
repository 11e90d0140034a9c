from result_core import Result, checked_args, err, ok, result_for


@result_for(float)
@checked_args(a=int | float, b=int | float)
def divide(a: float, b: float) -> Result[float, str]:
    """
    a 를 b 로 나눈다. 0 으로 나누면 Err 를 반환한다.
    Divide `a` by `b`; dividing by zero yields an Err.
    """
    if b == 0:
        return err("Division by zero")
    try:
        quotient = a / b
    except OverflowError as exc:
        # 정수 나눗셈 결과가 float 범위를 넘는 경우.
        # Integer quotient does not fit in a float.
        return err("Division result out of range", cause=exc)
    return ok(quotient)
