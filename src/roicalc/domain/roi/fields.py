"""Labels, help texts and grouping for the calculator form."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

from roicalc.domain.roi.contracts import RoiInputs


@dataclass(frozen=True)
class FieldSpec:
    key: str
    label: str
    help: str
    step: int
    wide: bool = False

    @property
    def default(self) -> float:
        return float(RoiInputs.model_fields[self.key].default)

    @property
    def placeholder(self) -> str:
        return f"e.g. {self.default:,.0f}"


STEP_TITLES: Dict[int, str] = {
    1: "Step 1: Current System Costs",
    2: "Step 2: Expected Improvements",
    3: "Step 3: Modernization Investment",
}

FIELDS: Tuple[FieldSpec, ...] = (
    FieldSpec(
        "current_maintenance_cost",
        "Annual Maintenance Cost (USD)",
        "What you spend per year keeping the legacy system running.",
        step=1,
    ),
    FieldSpec(
        "current_downtime_hours",
        "Monthly Downtime (Hours)",
        "Hours per month the system is down or degraded.",
        step=1,
    ),
    FieldSpec(
        "downtime_cost_per_hour",
        "Downtime Cost per Hour (USD)",
        "Revenue and productivity lost for every hour of downtime.",
        step=1,
    ),
    FieldSpec(
        "team_salary_cost",
        "Annual Team Salary Cost (USD)",
        "Total yearly salary cost of the team working on the system.",
        step=1,
    ),
    FieldSpec(
        "current_deployments_per_year",
        "Current Deployments per Year",
        "How many releases reach production in a year today.",
        step=1,
        wide=True,
    ),
    FieldSpec(
        "projected_maintenance_cost",
        "Projected Annual Maintenance Cost (USD)",
        "Expected yearly maintenance spend after modernization.",
        step=2,
    ),
    FieldSpec(
        "downtime_reduction_percent",
        "Expected Downtime Reduction (%)",
        "Share of today's downtime you expect to eliminate.",
        step=2,
    ),
    FieldSpec(
        "deployment_increase_percent",
        "Deployment Frequency Increase (%)",
        "Expected increase in release frequency.",
        step=2,
    ),
    FieldSpec(
        "productivity_gain_percent",
        "Team Productivity Gain (%)",
        "Expected uplift in team velocity.",
        step=2,
    ),
    FieldSpec(
        "modernization_cost",
        "One-time Modernization Cost (USD)",
        "Up-front investment for the modernization project.",
        step=3,
    ),
)

FIELDS_BY_KEY: Dict[str, FieldSpec] = {spec.key: spec for spec in FIELDS}


def fields_for_step(step: int) -> List[FieldSpec]:
    return [spec for spec in FIELDS if spec.step == step]


# (title, why it matters, benefit)
EXPLAINER_SECTIONS: Tuple[Tuple[str, str, str], ...] = (
    (
        "Current & Projected Maintenance Costs",
        "Shows direct cost savings from reducing reliance on outdated systems and patching.",
        "Helps quantify how modernization trims long-term operational spend.",
    ),
    (
        "Downtime Hours & Cost per Hour",
        "Legacy systems often crash or underperform. Every hour costs money and reputation.",
        "Users realize how even 10-20% improvement in uptime brings major financial returns.",
    ),
    (
        "Deployment Frequency & Expected Improvements",
        "Faster release cycles mean quicker innovation, less risk, and better customer experience.",
        "Helps IT leaders visualize how modernization fuels agility.",
    ),
    (
        "Team Productivity Gains",
        "Legacy systems slow teams down. Productivity gains show improved velocity and morale.",
        "Connects tech upgrade with business velocity and reduced attrition.",
    ),
    (
        "Team Salary Costs",
        "Used to calculate how much productivity gains convert into real savings.",
        "Encourages business leaders to connect tech improvements to HR/talent ROI.",
    ),
    (
        "Modernization Project Cost",
        'The only real "cost" input, used in the final ROI equation.',
        "Once they input this, the calculator shows how fast they'll earn it back.",
    ),
)

EXPLAINER_TITLE = "Understanding Your ROI Calculator Inputs"

POSITIVE_RESULTS_TITLE = "Why This Calculator Shows Positive Results"
POSITIVE_RESULTS_TEXT = (
    "With even conservative estimates, you're looking at a strong return in under a year. "
    "The design assumes even modest improvements (10-20%) create meaningful ROI, with payback "
    "periods shown in months, not years. Imagine what full modernization can do for you. "
    "Let's talk about your legacy system, no strings attached."
)


__all__ = [
    "EXPLAINER_SECTIONS",
    "EXPLAINER_TITLE",
    "FIELDS",
    "FIELDS_BY_KEY",
    "FieldSpec",
    "POSITIVE_RESULTS_TEXT",
    "POSITIVE_RESULTS_TITLE",
    "STEP_TITLES",
    "fields_for_step",
]
