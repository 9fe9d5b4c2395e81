from collections.abc import Sequence


def get_sorted_integers(n: int, ascending: bool = True) -> list[int]:
    if n < 0:
        raise ValueError(f"length must be non-negative, got {n}")
    return list(range(n)) if ascending else list(range(n - 1, -1, -1))


def count_inversions(values: Sequence) -> int:
    """Number of pairs i < j with values[i] > values[j], by merge counting."""

    def impl(arr: list) -> tuple[list, int]:
        if len(arr) <= 1:
            return arr, 0
        m = len(arr) // 2
        L, left_cnt = impl(arr[:m])
        R, right_cnt = impl(arr[m:])
        result = []
        cnt = left_cnt + right_cnt
        i = j = 0
        while i < len(L) and j < len(R):
            if R[j] < L[i]:
                result.append(R[j])
                cnt += len(L) - i
                j += 1
            else:
                result.append(L[i])
                i += 1
        result.extend(L[i:])
        result.extend(R[j:])
        return result, cnt

    return impl(list(values))[1]
