"""
Demo of centroid-linkage clustering on synthetic blobs.

This example shows how to:
1. Generate a small dataset with well separated groups
2. Run the agglomerative merge loop
3. Print the merge sequence and plot the dendrogram
"""

import torch
import matplotlib.pyplot as plt

# Add parent directory to path for imports
import sys
sys.path.append('..')

from hclust import CentroidLinkage, format_merge_report, plot_dendrogram, distance_matrix


def generate_blob_data(n_points_per_cluster=5, n_clusters=3, dimension=2,
                       spread=0.3, separation=5.0):
    """Generate isotropic Gaussian blobs with centres on a scaled grid."""
    torch.manual_seed(42)

    data_list = []
    for k in range(n_clusters):
        center = torch.zeros(dimension, dtype=torch.float64)
        center[k % dimension] = separation * (k // dimension + 1)
        points = center + spread * torch.randn(n_points_per_cluster, dimension, dtype=torch.float64)
        data_list.append(points)

    return torch.cat(data_list, dim=0)


def main():
    """Run the demo."""
    print("=== Centroid Linkage Demo ===\n")

    X = generate_blob_data()
    print(f"Data: {X.shape[0]} observations, {X.shape[1]} features")

    D = distance_matrix(X)
    off_diagonal = D[~torch.eye(len(X), dtype=torch.bool)]
    print(f"Closest pair of observations: {off_diagonal.min().item():.4f}")
    print(f"Farthest pair of observations: {off_diagonal.max().item():.4f}\n")

    engine = CentroidLinkage(verbose=1).fit(X)
    print(format_merge_report(engine.merges_))

    inversions = sum(
        1 for prev, curr in zip(engine.merges_, engine.merges_[1:])
        if curr.distance < prev.distance
    )
    print(f"\nInversions in the merge sequence: {inversions}")

    plot_dendrogram(engine.merges_, n_observations=len(X), annotate=True,
                    title="Centroid linkage on three blobs")
    plt.tight_layout()
    plt.show()


if __name__ == "__main__":
    main()
