import matplotlib.pyplot as plt


def print_summary(demand):
    """Print headline numbers for a demand DataFrame (hourly kW)."""
    hours = len(demand)
    print("\n" + "=" * 40)
    print("DEMAND RESULTS")
    print("=" * 40)
    print(f"Hours modelled:        {hours}")
    print(f"Mean total demand:     {demand['total_demand'].mean():.3f} kW")
    print(f"Peak total demand:     {demand['total_demand'].max():.3f} kW")
    # Hourly kW summed over hours is kWh
    print(f"Heating energy:        {demand['heating_demand'].sum():.1f} kWh")
    print(f"Cooling energy:        {demand['cooling_demand'].sum():.1f} kWh")
    print(f"Total energy:          {demand['total_demand'].sum():.1f} kWh")
    print("=" * 40)


def plot_demand(demand, title_suffix="", show=True):
    """
    Plot total, heating and cooling demand, plus temperatures when present.
    Returns the matplotlib figure.
    """
    has_raw = 'BAIT' in demand.columns
    n_panels = 2 if has_raw else 1

    fig = plt.figure(figsize=(14, 4 * n_panels + 1))

    # Subplot 1: Demand
    plt.subplot(n_panels, 1, 1)
    plt.plot(demand['time'], demand['total_demand'], label='Total', color='red', linewidth=2)
    plt.plot(demand['time'], demand['heating_demand'], label='Heating', color='orange', alpha=0.7)
    plt.plot(demand['time'], demand['cooling_demand'], label='Cooling', color='blue', alpha=0.7)
    plt.ylabel("Demand (kW)")

    title = "Energy Demand"
    if title_suffix:
        title += f" - {title_suffix}"
    plt.title(title)
    plt.legend()
    plt.grid(True)

    # Subplot 2: What the building 'feels'
    if has_raw:
        plt.subplot(n_panels, 1, 2)
        plt.plot(demand['time'], demand['T'], label='Air Temperature', color='grey', alpha=0.6)
        plt.plot(demand['time'], demand['BAIT'], label='BAIT', color='green', linewidth=2)
        plt.ylabel("Temperature (C)")
        plt.legend()
        plt.grid(True)

    plt.tight_layout()
    if show:
        plt.show()
    return fig
