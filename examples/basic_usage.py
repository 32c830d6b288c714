"""
Basic usage example of the wind park library.
This example demonstrates:
- Loading the sample fleet
- Setting the market price and production target
- Computing and printing the production plan
"""

from windpark import WindPark, ParkConfig, InvalidArgumentError
from windpark.optimization import get_planner


def main():
    config = ParkConfig.with_sample_turbines(name="Basic Park Example")
    park = WindPark(config)

    print(f"Park: {config.name}")
    print(f"Maximum capacity: {park.maximum_capacity} MWh")

    park.set_market_price(6)
    park.update_production_target(10)

    plan = park.compute_production_plan()
    print(park.format_production_plan(plan))

    # Rejected updates leave the target unchanged
    try:
        park.update_production_target(100)
    except InvalidArgumentError as e:
        print(f"\nRejected: {e}")
    print(f"Target is still {park.get_production_target()} MWh")

    # Compare with the exact planner on the same fleet
    exact = WindPark(ParkConfig(), registry=park.registry, planner=get_planner("milp"))
    exact.set_market_price(6)
    exact.set_production_target(10)
    result = exact.allocate()
    print(f"\nMILP plan: {result.online} -> {result.total_production} MWh, cost {result.total_cost}€")


if __name__ == "__main__":
    main()
