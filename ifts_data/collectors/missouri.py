from __future__ import annotations

from ..models import Dataset, ResourceLink, Source, StatEntry
from .base import BaseCollector

# (category, statistic, description)
_REENTRY_CHALLENGES = [
    ("Housing", "60%+", "Women face housing instability within first year of release"),
    ("Employment", "27%", "Unemployment rate for formerly incarcerated individuals (vs 4% general)"),
    ("Healthcare Access", "70%", "Formerly incarcerated women report difficulty accessing healthcare"),
    ("Mental Health", "75%", "Incarcerated women report history of mental health issues"),
    ("Substance Abuse", "60%", "Women in prison report substance abuse history"),
    ("Trauma History", "86%", "Incarcerated women report history of physical or sexual abuse"),
]


class MissouriDOCCollector(BaseCollector):
    """Missouri Department of Corrections population and reentry figures."""

    DEFAULT_SOURCE = Source(
        key="missouri",
        name="Missouri Department of Corrections",
        url="https://doc.mo.gov/media-center/newsroom/data-and-statistics",
        filename="missouri-doc.json",
    )

    def build_dataset(self) -> Dataset:
        return Dataset(
            source=self.source.name,
            category="Missouri Incarceration Statistics",
            statistics=[
                StatEntry(
                    metric="Total Missouri Prison Population",
                    value="~23,000",
                    description="Total individuals incarcerated in Missouri state prisons",
                    year=2024,
                    source="Missouri DOC",
                ),
                StatEntry(
                    metric="Female Prison Population in Missouri",
                    value="~2,300",
                    percentage="~10% of total",
                    description="Women incarcerated in Missouri state facilities",
                    year=2024,
                    source="Missouri DOC",
                ),
                StatEntry(
                    metric="African American Incarceration Rate (Missouri)",
                    value="5x higher",
                    description="African Americans are incarcerated at 5 times the rate of whites in Missouri",
                    source="Prison Policy Initiative / Missouri DOC",
                ),
                StatEntry(
                    metric="Women Released Annually (Missouri)",
                    value="~3,000",
                    description="Estimated number of women released from Missouri prisons annually",
                    source="Missouri DOC Annual Reports",
                ),
                StatEntry(
                    metric="Primary Women's Facility",
                    value="Chillicothe Correctional Center",
                    location="Chillicothe, MO",
                    description="Primary facility housing female offenders in Missouri",
                    source="Missouri DOC",
                ),
            ],
            sections={
                "reentryStatistics": {
                    "description": "Challenges facing women returning from incarceration in Missouri",
                    "challenges": [
                        {"category": category, "statistic": statistic, "description": description}
                        for category, statistic, description in _REENTRY_CHALLENGES
                    ],
                },
            },
            resources=[
                ResourceLink("Missouri DOC", "https://doc.mo.gov/"),
                ResourceLink("Missouri DOC Data & Statistics", "https://doc.mo.gov/media-center/newsroom/data-and-statistics"),
                ResourceLink("Missouri Reentry Process", "https://doc.mo.gov/divisions/probation-parole/reentry"),
            ],
        )
