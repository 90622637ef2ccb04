"""
VitalDB Surgical Cases — Interactive Case Dashboard

Analytics layer behind a Streamlit page that explores the VitalDB
surgical case export (vitaldb_cases.csv): a duration vs ICU-stay scatter
plot with department/ASA/operation-type filters, and per-age-group pie and
bar charts.

To connect a different front end:
    Call aggregator.summarize(cases, CaseFilter(...)) for chart input and
    dashboard.get_summary_cards() / get_scatter_data() for display-ready
    values. None of these functions touch the UI.

To add a new pie-chart metric:
    Add an entry to config.METRIC_REGISTRY naming the column to group on
    and list the key in config.AGE_VIEW_METRICS.
"""
