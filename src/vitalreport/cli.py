"""CLI for the vitalreport metrics and report engine."""

from __future__ import annotations

import logging
import sys
from datetime import datetime

import click

from vitalreport.samples import VitalReportError, parse_timestamp


def _timestamp_option(ctx: click.Context, param: click.Parameter, value: str | None) -> datetime | None:
    if value is None:
        return None
    try:
        return parse_timestamp(value)
    except VitalReportError as e:
        raise click.BadParameter(str(e)) from e


def _window_options(f):
    f = click.option("--end", default=None, callback=_timestamp_option,
                     help="Window end (ISO-8601, inclusive).")(f)
    f = click.option("--start", default=None, callback=_timestamp_option,
                     help="Window start (ISO-8601, inclusive).")(f)
    f = click.option("--strict", is_flag=True,
                     help="Reject values outside plausible physiological ranges.")(f)
    return f


def _load_window(file: str, start: datetime | None, end: datetime | None, strict: bool):
    from vitalreport.loader import load_samples
    from vitalreport.samples import select_window

    return select_window(load_samples(file, strict=strict), start, end)


def _emit(text: str, output: str | None) -> None:
    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(text)
        click.echo(f"Written to {output}")
    else:
        click.echo(text)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def main(verbose: bool) -> None:
    """vitalreport -- metrics, trends and reports from vital-sign samples."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@main.command("metrics")
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@_window_options
@click.option("--output", "-o", default=None, help="Write metrics JSON to file.")
def metrics_cmd(file: str, start: datetime | None, end: datetime | None,
                strict: bool, output: str | None) -> None:
    """Compute per-signal metrics for a sample file."""
    from vitalreport.analytics.metrics import calculate_metrics

    try:
        samples = _load_window(file, start, end, strict)
        metrics = calculate_metrics(samples)
    except VitalReportError as e:
        raise click.ClickException(str(e)) from e

    _emit(metrics.to_json(), output)


@main.command("report")
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("--type", "-t", "report_type", default="health_summary",
              help="health_summary, ecg_analysis, trend_analysis or custom.")
@_window_options
@click.option("--output", "-o", default=None, help="Write report JSON to file.")
def report_cmd(file: str, report_type: str, start: datetime | None,
               end: datetime | None, strict: bool, output: str | None) -> None:
    """Build a typed report payload for a sample file."""
    from vitalreport.analytics.reports import build_report_data

    try:
        samples = _load_window(file, start, end, strict)
        data = build_report_data(report_type, samples)
    except VitalReportError as e:
        raise click.ClickException(str(e)) from e

    _emit(data.to_json(), output)


@main.command("summary")
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("--profile", "-p", default=None, type=click.Path(exists=True, dir_okay=False),
              help="Health profile JSON file.")
@_window_options
@click.option("--output", "-o", default=None, help="Write summary JSON to file.")
def summary_cmd(file: str, profile: str | None, start: datetime | None,
                end: datetime | None, strict: bool, output: str | None) -> None:
    """Generate a health summary with trends and recommendations."""
    from vitalreport.analytics.reports import build_health_summary
    from vitalreport.loader import load_profile

    try:
        samples = _load_window(file, start, end, strict)
        health_profile = load_profile(profile) if profile else None
        if not samples:
            raise click.ClickException("No health data found for the specified period")
        summary = build_health_summary(
            samples,
            start=start or samples[0].timestamp,
            end=end or samples[-1].timestamp,
            profile=health_profile,
        )
    except VitalReportError as e:
        raise click.ClickException(str(e)) from e

    if output:
        _emit(summary.to_json(), output)
        return

    click.echo(f"\n{'=' * 60}")
    click.echo(f"  {summary.title}")
    click.echo(f"{'=' * 60}")
    m = summary.metrics
    click.echo(f"  Readings:   {summary.total_readings}")
    click.echo(f"  Heart rate: {m.heart_rate.average} bpm ({m.heart_rate.trend})")
    click.echo(f"  SpO2:       {m.spo2.average} % ({m.spo2.trend})")
    click.echo(f"  Lactate:    {m.lactate.average} mmol/L ({m.lactate.trend})")
    click.echo(f"  Waveform:   {m.waveform.rhythm}, quality {m.waveform.quality}")
    if m.waveform.abnormalities:
        click.echo(f"              flags: {', '.join(m.waveform.abnormalities)}")
    click.echo(f"{'=' * 60}")
    for rec in summary.recommendations:
        click.echo(f"  - {rec}")


@main.command("simulate")
@click.option("--count", "-n", default=60, help="Number of samples.")
@click.option("--interval", "-i", default=2.0, help="Seconds between samples.")
@click.option("--start", default=None, callback=_timestamp_option,
              help="First sample timestamp (default: now).")
@click.option("--seed", default=None, type=int, help="Random seed.")
@click.option("--output", "-o", default=None, help="Write samples as JSONL to file.")
def simulate_cmd(count: int, interval: float, start: datetime | None,
                 seed: int | None, output: str | None) -> None:
    """Generate a simulated vital-sign sample stream."""
    import json

    from vitalreport.loader import write_samples
    from vitalreport.simulator import simulate_samples

    try:
        samples = list(simulate_samples(count, start=start, interval_sec=interval, seed=seed))
    except VitalReportError as e:
        raise click.ClickException(str(e)) from e

    if output:
        write_samples(samples, output)
        click.echo(f"{len(samples)} samples written to {output}")
    else:
        for s in samples:
            click.echo(json.dumps(s.to_dict()))


if __name__ == "__main__":
    main()
