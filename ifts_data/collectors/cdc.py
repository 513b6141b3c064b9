from __future__ import annotations

from ..models import Dataset, ResourceLink, Source, StatEntry
from .base import BaseCollector


class CDCCollector(BaseCollector):
    """HIV/AIDS and hepatitis figures for correctional settings."""

    DEFAULT_SOURCE = Source(
        key="cdc",
        name="CDC - Centers for Disease Control and Prevention",
        url="https://www.cdc.gov/hiv/group/correctional.html",
        filename="cdc-hiv-aids.json",
    )

    def build_dataset(self) -> Dataset:
        return Dataset(
            source=self.source.name,
            category="HIV/AIDS in Correctional Settings",
            statistics=[
                StatEntry(
                    metric="HIV Rate in Prisons vs General Population",
                    value="5x higher",
                    description="Incarcerated individuals have HIV rates approximately 5 times higher than the general population",
                    source="CDC Correctional Health",
                ),
                StatEntry(
                    metric="HIV Prevalence in State Prisons",
                    value="1.3%",
                    comparison="0.4% in general US population",
                    multiplier="3.25x higher",
                    year=2019,
                    source="CDC HIV Surveillance Report",
                ),
                StatEntry(
                    metric="Women with HIV in Prison",
                    value="1.9%",
                    description="Female inmates have higher HIV rates than male inmates (1.3%)",
                    year=2019,
                    source="Bureau of Justice Statistics / CDC",
                ),
                StatEntry(
                    metric="AIDS-Related Deaths in Prison",
                    value="Declining",
                    description="Deaths have declined significantly with antiretroviral treatment availability",
                    source="CDC",
                ),
                StatEntry(
                    metric="Hepatitis C in Prisons",
                    value="17-25%",
                    description="Hepatitis C rates are significantly elevated in correctional populations",
                    source="CDC Viral Hepatitis",
                ),
            ],
            sections={
                "keyFindings": [
                    "Incarcerated populations face disproportionately high rates of HIV/AIDS",
                    "Women in prison have higher HIV rates than incarcerated men",
                    "African American women are disproportionately affected",
                    "Lack of consistent healthcare post-release contributes to poor outcomes",
                    "HIV testing and treatment in prisons has improved but gaps remain",
                ],
            },
            resources=[
                ResourceLink("CDC HIV and Corrections", "https://www.cdc.gov/hiv/group/correctional.html"),
                ResourceLink("CDC HIV Statistics", "https://www.cdc.gov/hiv/statistics/overview/index.html"),
            ],
        )
