from windaction import WindActionInput, calculate


def main():
    inp = WindActionInput(
        altitude_m=1500,
        fundamental_basic_wind_speed=28,
        height_m=12,
        terrain_category="A",
    )
    out = calculate(inp)
    print(out)


if __name__ == "__main__":
    main()
