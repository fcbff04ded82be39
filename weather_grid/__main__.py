from weather_grid.menu import main

main()
