import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from pathlib import Path

from weather_grid.grid_store import GridStore
from weather_grid.weather.config import MAP_IMAGE_FILE


def save_weather_maps(grid: GridStore, output_path=MAP_IMAGE_FILE):
    """Save cloud cover and pressure heat maps side by side, cities outlined."""
    print("Creating visualization...")
    bounds = grid.bounds
    extent = (bounds.x_min - 0.5, bounds.x_max + 0.5, bounds.y_min - 0.5, bounds.y_max + 0.5)

    fig, axes = plt.subplots(1, 2, figsize=(12, 6))
    panels = [
        (axes[0], grid.cloud_cover, 'Cloud Cover (%)', 'Blues'),
        (axes[1], grid.pressure, 'Atmospheric Pressure (%)', 'Oranges'),
    ]
    for ax, values, title, cmap in panels:
        # row 0 is y_min, so draw with origin at the bottom
        image = ax.imshow(values, origin='lower', extent=extent, cmap=cmap, vmin=0, vmax=100)
        rows, cols = grid.is_city.nonzero()
        ax.scatter(cols + bounds.x_min, rows + bounds.y_min,
                   marker='s', facecolors='none', edgecolors='black', s=60)
        ax.set_title(title, pad=10, fontsize=12)
        ax.set_xlabel('x')
        ax.set_ylabel('y')
        fig.colorbar(image, ax=ax, fraction=0.046, pad=0.04)

    output_path = Path(output_path)
    plt.savefig(output_path, dpi=150, bbox_inches='tight', facecolor='white')
    plt.close(fig)

    print(f"Completed! Maps saved to {output_path}")
    return output_path
