from scene import BatchTotals, SceneStats

FAILED_WIDTH = 7
NAME_WIDTH = 70
NUMBER_WIDTH = 10


def _format_number(value) -> str:
    if isinstance(value, float):
        return f"{value:>{NUMBER_WIDTH}.2f}"
    return f"{value:>{NUMBER_WIDTH}}"


def get_dividers() -> str:
    return (f"{'------ ':>{FAILED_WIDTH}}"
            f"{'-----':<{NAME_WIDTH}}"
            f"{'----------':<{NUMBER_WIDTH}}"
            f"{'-----':>{NUMBER_WIDTH}}"
            f"{'-------':>{NUMBER_WIDTH}}"
            f"{'-----':>{NUMBER_WIDTH}}")


def get_headers() -> str:
    headers = (f"{'Failed ':>{FAILED_WIDTH}}"
               f"{'Name':<{NAME_WIDTH}}"
               f"{'Cost':<{NUMBER_WIDTH}}"
               f"{'%diff':>{NUMBER_WIDTH}}"
               f"{'Pixels':>{NUMBER_WIDTH}}"
               f"{'delta':>{NUMBER_WIDTH}}")
    return headers + "\n" + get_dividers()


def get_scene_row(name: str, n_failed: int, stats: SceneStats) -> str:
    """One table row: failures, name, cost, cost drift in % of the reference cost, movement and its drift."""
    row = f"{n_failed:>{FAILED_WIDTH - 1}} "
    row += f"{name:<{NAME_WIDTH}}"
    row += f"{float(stats.cost):>{NUMBER_WIDTH}.2f}"
    row += f"{stats.d_cost_percent:>{NUMBER_WIDTH}.2f}"
    row += _format_number(stats.movement)
    row += _format_number(stats.d_movement)
    return row


def get_totals_row(totals: BatchTotals) -> str:
    """Dividers and the sums over the whole root. The failed column counts failed scenes."""
    name = f"{'':21}total ({totals.n_scenes} scenes):"
    return get_dividers() + "\n" + get_scene_row(name, totals.n_failed, totals.stats)


def get_quiet_summary(totals: BatchTotals) -> str:
    return f"{totals.root}: {totals.n_failed} of {totals.n_scenes} scenes failed"
