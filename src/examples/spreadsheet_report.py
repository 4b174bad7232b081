"""
Console report for a spreadsheet dataset.

Prints the raw matrix, its column statistics, the standardized matrix, the
observation distance matrix and the full centroid-linkage merge sequence.

Usage:
    python spreadsheet_report.py data.xlsx [--sheet 0] [--standardize] [--plot dendrogram.png]
"""

import argparse
import sys

# Add parent directory to path for imports
sys.path.append('..')

from hclust import (
    CentroidLinkage,
    ClusteringError,
    load_matrix,
    column_statistics,
    mean_square_deviation,
    standardize,
    distance_matrix,
    format_matrix,
    format_vector,
    format_distance_matrix,
    format_merge_report,
)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Centroid-linkage clustering report")
    parser.add_argument("path", help="Spreadsheet (.xlsx/.xls) or .csv file; first row is a header")
    parser.add_argument("--sheet", default=0,
                        help="Worksheet index or name (default: first sheet)")
    parser.add_argument("--standardize", action="store_true",
                        help="Cluster the standardized matrix instead of the raw one")
    parser.add_argument("--plot", metavar="PNG", default=None,
                        help="Save a dendrogram of the merge sequence to this file")
    parser.add_argument("--verbose", type=int, default=0)
    return parser.parse_args(argv)


def main(argv=None):
    """Run the report."""
    args = parse_args(argv)
    sheet = int(args.sheet) if str(args.sheet).isdigit() else args.sheet

    try:
        data = load_matrix(args.path, sheet=sheet)

        mean, std = column_statistics(data)
        msd = mean_square_deviation(data, mean)
        standardized = standardize(data, mean, std)

        target = standardized if args.standardize else data
        distances = distance_matrix(target)
        engine = CentroidLinkage(verbose=args.verbose).fit(target)
    except (ClusteringError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("Source matrix:")
    print(format_matrix(data, decimals=2))
    print("\nMean vector:")
    print(format_vector(mean))
    print("\nMean square deviation vector:")
    print(format_vector(msd))
    print("\nStandardized matrix:")
    print(format_matrix(standardized, decimals=2))
    print("\nDistance matrix:")
    print(format_distance_matrix(distances))
    print("\nMerge sequence:")
    print(format_merge_report(engine.merges_))

    if args.plot:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        from hclust import plot_dendrogram

        ax = plot_dendrogram(engine.merges_, n_observations=data.shape[0],
                             annotate=True, title="Centroid linkage")
        ax.figure.tight_layout()
        ax.figure.savefig(args.plot, dpi=150)
        plt.close(ax.figure)
        print(f"\nDendrogram saved to {args.plot}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
