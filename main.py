#!/usr/bin/python3

import argparse
import json
import os
import sys

from demandninja import load_csv
from demandninja import results
from demandninja.demand import demand_ninja
from demandninja.diurnal import load_diurnal_profile
from demandninja.errors import DemandNinjaError
from demandninja.parameters import (
    BaitParameters,
    EnergyParameters,
    load_parameters,
    default_bait,
    default_nrg,
)


def save_parameters(bait, nrg, filename):
    data = {
        "description": "demand.ninja model parameters",
        "bait": bait.to_dict(),
        "nrg": nrg.to_dict(),
    }
    with open(filename, 'w') as f:
        json.dump(data, f, indent=4)
    print(f"Parameters saved to: {filename}")


def run_main(args_list=None):
    parser = argparse.ArgumentParser(
        description="Hourly Building Energy Demand from Weather (BAIT model)",
        formatter_class=argparse.RawTextHelpFormatter
    )

    parser.add_argument("csv_file", nargs='?', help="Path to weather CSV downloaded from renewables.ninja")

    # Parameters
    parser.add_argument("--bait", metavar="JSON_FILE",
                        help="BAIT parameters (smoothing, solar, wind, humidity).\n"
                             "Missing keys fall back to the defaults.")
    parser.add_argument("--nrg", metavar="JSON_FILE",
                        help="Energy parameters (t_heat, t_cool, p_base, p_heat, p_cool).\n"
                             "Missing keys fall back to the defaults.")
    parser.add_argument("--profile", metavar="CSV_FILE",
                        help="Diurnal profile CSV (hour, heating, cooling). Defaults to the bundled global profile.")

    # Model Options
    parser.add_argument("--no-diurnal", action="store_true", help="Do not apply the hour-of-day demand profile")
    parser.add_argument("--no-raw", action="store_true", help="Only output demand columns (drop weather, BAIT, HDD, CDD)")
    parser.add_argument("--local-time", action="store_true", help="Use the 'local_time' column for timestamps")

    # Output Options
    parser.add_argument("-o", "--output", default="demand.csv", help="Filename for hourly demand CSV (default: demand.csv)")
    parser.add_argument("--save-params", metavar="JSON_FILE", help="Save the parameters used to this JSON file")
    parser.add_argument("--plot", action="store_true", help="Plot the results")

    # If no args provided (and not called programmatically with empty list), show help
    if args_list is None and len(sys.argv) == 1:
        parser.print_help()
        print("\nUsage Examples:")
        print("  1. Default parameters:")
        print("     python main.py ninja_weather_51.4772_0.0000.csv")
        print("\n  2. Custom building, no diurnal profile:")
        print("     python main.py weather.csv --bait my_bait.json --nrg my_nrg.json --no-diurnal")
        print("\n  3. Demand columns only, plotted:")
        print("     python main.py weather.csv --no-raw --plot -o london.csv")
        return 1

    args = parser.parse_args(args_list)

    if not args.csv_file:
        print("Error: You must provide a weather CSV file.")
        return 1

    for path in (args.csv_file, args.bait, args.nrg, args.profile):
        if path and not os.path.exists(path):
            print(f"Error: File '{path}' not found.")
            return 1

    try:
        bait = load_parameters(args.bait, BaitParameters, use_defaults=True) if args.bait else default_bait()
        nrg = load_parameters(args.nrg, EnergyParameters, use_defaults=True) if args.nrg else default_nrg()
        print(f"BAIT parameters:   {bait.to_dict()}")
        print(f"Energy parameters: {nrg.to_dict()}")

        profile = None
        if not args.no_diurnal:
            profile = load_diurnal_profile(args.profile)

        weather = load_csv.read_ninja_weather(args.csv_file, use_local_time=args.local_time)

        demand = demand_ninja(
            weather, bait, nrg,
            use_diurnal_profile=not args.no_diurnal,
            add_raw_data=not args.no_raw,
            profile=profile
        )
    except (DemandNinjaError, FileNotFoundError) as e:
        print(f"Error: {e}")
        return 1

    demand.to_csv(args.output, index=False)
    print(f"Hourly demand saved to: {args.output}")

    if args.save_params:
        save_parameters(bait, nrg, args.save_params)

    results.print_summary(demand)
    if args.plot:
        results.plot_demand(demand, title_suffix=os.path.basename(args.csv_file))
    return 0


if __name__ == "__main__":
    sys.exit(run_main())
