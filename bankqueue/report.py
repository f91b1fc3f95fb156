from typing import List

from .models import SimulationRequest, SimulationResult

RULE = "=" * 51
NO_STATISTICS = "No customers were served. Cannot generate wait-time statistics."

def format_banner(req: SimulationRequest) -> str:
    hours = req.horizon / 60.0
    lines = [
        f"--- Starting {hours:g}-Hour ({req.horizon} Minute) Simulation ---",
        f"     Avg. Arrivals / Min (Lambda): {req.arrival_rate:.2f}",
        f"     Number of Tellers: {req.tellers}",
        "-" * 50,
    ]
    return "\n".join(lines)

def format_report(result: SimulationResult) -> str:
    lines: List[str] = [
        "========== FINAL SIMULATION REPORT ==========",
        "",
        "--- Simulation Summary ---",
        f"Total Customers Arrived: {result.total_arrived}",
        f"Total Customers Served:  {result.total_served}",
        f"Customers Left in Queue: {result.remaining_in_queue}",
        "",
    ]

    stats = result.statistics
    if stats is None:
        lines.append(NO_STATISTICS)
    else:
        lines += [
            "--- Wait Time Analysis (in minutes) ---",
            f"Mean (Average) Wait: {stats.mean:.2f} minutes",
            f"Median Wait:         {stats.median:.1f} minutes",
            f"Mode Wait:           {stats.mode} minutes",
            f"Standard Deviation:  {stats.std_dev:.2f} minutes",
            f"Longest Wait Time:   {stats.max_wait} minutes",
        ]
    lines.append(RULE)
    return "\n".join(lines)
