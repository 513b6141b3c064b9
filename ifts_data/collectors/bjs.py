from __future__ import annotations

from ..models import Dataset, ResourceLink, Source, StatEntry
from .base import BaseCollector

_INTERVENTIONS = [
    ("Education Programs", "43% lower recidivism"),
    ("Vocational Training", "28% lower recidivism"),
    ("Cognitive Behavioral Therapy", "25% lower recidivism"),
    ("Mentorship Programs", "20-30% lower recidivism"),
    ("Transitional Housing", "Significant reduction in first-year returns"),
    ("Employment Assistance", "Critical for long-term success"),
]


class BJSCollector(BaseCollector):
    """National recidivism figures from the Bureau of Justice Statistics."""

    DEFAULT_SOURCE = Source(
        key="bjs",
        name="Bureau of Justice Statistics (BJS)",
        url="https://bjs.ojp.gov/topics/recidivism",
        filename="bjs-recidivism.json",
    )

    def build_dataset(self) -> Dataset:
        aaw_statistics = [
            StatEntry(
                metric="Incarceration Rate Disparity",
                value="2x",
                description="African American women are incarcerated at twice the rate of white women",
                source="The Sentencing Project",
            ),
            StatEntry(
                metric="Lifetime Likelihood of Imprisonment",
                value="1 in 18",
                description="Lifetime likelihood of imprisonment for Black women (vs 1 in 111 for white women)",
                source="BJS",
            ),
            StatEntry(
                metric="Percentage of Female Prison Population",
                value="~22%",
                description="African American women as percentage of total female prison population",
                comparison="~13% of US female population",
                source="BJS / Census",
            ),
        ]
        return Dataset(
            source=self.source.name,
            category="Recidivism and Reentry Statistics",
            statistics=[
                StatEntry(
                    metric="National Recidivism Rate (5 years)",
                    value="44%",
                    description="Percentage of released prisoners who return to prison within 5 years",
                    year=2021,
                    source="BJS Recidivism of Prisoners Released Study",
                ),
                StatEntry(
                    metric="Women's Recidivism Rate",
                    value="~40%",
                    description="Women have slightly lower recidivism rates than men",
                    comparison="Men: ~46%",
                    source="BJS",
                ),
                StatEntry(
                    metric="3-Year Rearrest Rate",
                    value="68%",
                    description="Percentage of released prisoners rearrested within 3 years",
                    source="BJS",
                ),
                StatEntry(
                    metric="First Year Recidivism",
                    value="29%",
                    description="Nearly one-third return within the first year - the critical period",
                    source="BJS",
                ),
            ],
            sections={
                "africanAmericanWomenStatistics": {
                    "description": "Statistics specific to African American women and incarceration",
                    "statistics": [s.to_dict() for s in aaw_statistics],
                },
                "whatWorks": {
                    "description": "Evidence-based practices that reduce recidivism",
                    "interventions": [
                        {"intervention": name, "reduction": reduction} for name, reduction in _INTERVENTIONS
                    ],
                    "source": "RAND Corporation / National Institute of Justice",
                },
            },
            resources=[
                ResourceLink("Bureau of Justice Statistics", "https://bjs.ojp.gov/"),
                ResourceLink("BJS Recidivism Studies", "https://bjs.ojp.gov/topics/recidivism"),
                ResourceLink("The Sentencing Project", "https://www.sentencingproject.org/"),
            ],
        )
