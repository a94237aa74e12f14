import logging

import numpy as np
import pytest
from Bio.SVDSuperimposer import SVDSuperimposer
from numpy.testing import assert_allclose
from scipy.spatial.transform import Rotation

from rigidmap import (
    AtomBijection,
    DegenerateGeometryError,
    DimensionMismatchError,
    KabschMinimizer,
    SVDKabschMinimizer,
    compute_rmsd,
    compute_rmsd_minimizer,
    rigid_transform,
)

MINIMIZERS = [KabschMinimizer, SVDKabschMinimizer]


def random_points(seed, n=10):
    return np.random.default_rng(seed).normal(size=(n, 3)) * 3.0


def moved(points, seed, translation=(1.5, -2.0, 4.0)):
    rotation = Rotation.random(random_state=seed).as_matrix()
    return rotation, points @ rotation.T + np.asarray(translation)


def test_rmsd_of_identical_sets_is_zero():
    """Test that identical point sets have zero RMSD."""
    points = random_points(0)
    assert compute_rmsd(points, points.copy()) == 0.0


def test_rmsd_is_symmetric():
    """Test RMSD does not depend on argument order."""
    a, b = random_points(1), random_points(2)
    assert compute_rmsd(a, b) == pytest.approx(compute_rmsd(b, a))


def test_rmsd_known_value():
    """Test RMSD against a hand-computed value."""
    source = np.zeros((4, 3))
    target = np.tile([3.0, 4.0, 0.0], (4, 1))
    assert compute_rmsd(source, target) == pytest.approx(5.0)


def test_rmsd_does_not_mutate_inputs():
    """Test RMSD leaves its inputs untouched."""
    a, b = random_points(1), random_points(2)
    a_copy, b_copy = a.copy(), b.copy()
    compute_rmsd(a, b)
    assert_allclose(a, a_copy)
    assert_allclose(b, b_copy)


def test_rmsd_length_mismatch():
    """Test point sets of different lengths are rejected."""
    with pytest.raises(DimensionMismatchError):
        compute_rmsd(random_points(0, 4), random_points(0, 5))
    with pytest.raises(ValueError):
        compute_rmsd(random_points(0, 4), random_points(0, 5))


def test_rmsd_empty_input():
    """Test empty point sets are rejected."""
    with pytest.raises(DimensionMismatchError):
        compute_rmsd([], [])


def test_bijection_length_mismatch():
    """Test bijection construction checks lengths."""
    with pytest.raises(DimensionMismatchError):
        AtomBijection(random_points(0, 3), random_points(0, 4))


def test_bijection_rmsd_matches_function():
    """Test bijection RMSD agrees with compute_rmsd."""
    a, b = random_points(3), random_points(4)
    assert AtomBijection(a, b).rmsd() == pytest.approx(compute_rmsd(a, b))


@pytest.mark.parametrize("minimizer_cls", MINIMIZERS)
@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_minimizer_recovers_rigid_motion(minimizer_cls, seed):
    """Test minimizers recover a known rotation and translation."""
    source = random_points(seed)
    rotation, target = moved(source, seed + 10)

    transform = minimizer_cls().compute(AtomBijection(source, target))

    assert_allclose(transform.rotation, rotation, atol=1e-8)
    assert_allclose(transform.translation, [1.5, -2.0, 4.0], atol=1e-8)
    assert transform.is_proper_rotation()
    assert compute_rmsd(transform.apply(source), target) == pytest.approx(0.0, abs=1e-8)


def test_minimizer_with_centered_source_translates_by_centroid_difference():
    """Test translation equals the centroid shift for a centred source."""
    source = random_points(5)
    source -= source.mean(axis=0)
    _, target = moved(source, 6)

    transform = KabschMinimizer().fit(source, target)

    assert_allclose(transform.translation, target.mean(axis=0) - source.mean(axis=0), atol=1e-10)


def test_minimizer_applied_in_place_reaches_zero_rmsd():
    """Test applying the fitted transform in place aligns the sets."""
    source = random_points(8)
    _, target = moved(source, 9)

    transform = compute_rmsd_minimizer(AtomBijection(source, target))
    rigid_transform(source, transform)

    assert compute_rmsd(source, target) == pytest.approx(0.0, abs=1e-8)


def test_minimizer_does_not_mutate_bijection():
    """Test fitting leaves the bijection unchanged."""
    source = random_points(8)
    _, target = moved(source, 9)
    bijection = AtomBijection(source, target)
    before = bijection.source.copy()

    KabschMinimizer().compute(bijection)

    assert_allclose(bijection.source, before)


def test_eigen_and_svd_minimizers_agree_on_noisy_data():
    """Test closed-form and SVD fits agree on noisy data."""
    rng = np.random.default_rng(11)
    source = random_points(12, n=20)
    _, target = moved(source, 13)
    target += rng.normal(scale=0.2, size=target.shape)

    eigen = KabschMinimizer().fit(source, target)
    svd = SVDKabschMinimizer().fit(source, target)

    assert_allclose(eigen.rotation, svd.rotation, atol=1e-8)
    assert_allclose(eigen.translation, svd.translation, atol=1e-8)


@pytest.mark.parametrize("minimizer_cls", MINIMIZERS)
def test_fitted_rmsd_matches_biopython(minimizer_cls):
    """Test fitted RMSD against Bio.SVDSuperimposer."""
    rng = np.random.default_rng(21)
    source = random_points(22, n=15)
    _, target = moved(source, 23)
    target += rng.normal(scale=0.3, size=target.shape)

    transform = minimizer_cls().fit(source, target)

    superimposer = SVDSuperimposer()
    superimposer.set(target, source)
    superimposer.run()
    assert compute_rmsd(transform.apply(source), target) == pytest.approx(
        superimposer.get_rms(), abs=1e-8
    )


def test_planar_points_give_exact_proper_rotation():
    """Test planar input yields the exact rotation even in strict mode."""
    source = np.array([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [0.0, 2.0, 0.0]])
    rotation, target = moved(source, 31)

    transform = KabschMinimizer(strict=True).fit(source, target)

    assert_allclose(transform.rotation, rotation, atol=1e-8)
    assert transform.is_proper_rotation()


def test_mirror_image_is_fitted_by_proper_rotation_by_default():
    """Test mirror images are fitted by a proper rotation."""
    source = random_points(40)
    target = source * np.array([1.0, 1.0, -1.0])

    eigen = KabschMinimizer().fit(source, target)
    svd = SVDKabschMinimizer().fit(source, target)

    assert eigen.is_proper_rotation()
    assert_allclose(eigen.rotation, svd.rotation, atol=1e-8)


def test_mirror_image_reflection_fallback(caplog):
    """Test reflections are returned and logged when allowed."""
    source = random_points(40)
    target = source * np.array([1.0, 1.0, -1.0])

    with caplog.at_level(logging.WARNING):
        transform = KabschMinimizer(proper_rotation=False).fit(source, target)

    assert np.linalg.det(transform.rotation) == pytest.approx(-1.0)
    assert_allclose(transform.rotation.T @ transform.rotation, np.eye(3), atol=1e-8)
    assert compute_rmsd(transform.apply(source), target) == pytest.approx(0.0, abs=1e-8)
    assert "reflection" in caplog.text


def collinear_points():
    return np.outer(np.arange(4.0), [1.0, 2.0, -1.0]) + np.array([0.5, 0.0, 1.0])


def test_collinear_points_give_finite_rotation(caplog):
    """Test collinear input yields a valid rotation and a warning."""
    source = collinear_points()
    _, target = moved(source, 50)

    with caplog.at_level(logging.WARNING):
        transform = KabschMinimizer().fit(source, target)

    assert np.all(np.isfinite(transform.rotation))
    assert transform.is_proper_rotation()
    assert compute_rmsd(transform.apply(source), target) == pytest.approx(0.0, abs=1e-8)
    assert "collinear" in caplog.text


def test_collinear_points_raise_in_strict_mode():
    """Test strict mode rejects collinear input."""
    source = collinear_points()
    _, target = moved(source, 50)

    with pytest.raises(DegenerateGeometryError):
        KabschMinimizer(strict=True).fit(source, target)


def nearly_collinear_points():
    rng = np.random.default_rng(60)
    return np.outer(np.arange(10.0), [1.0, 0.0, 0.0]) + rng.normal(scale=0.01, size=(10, 3))


def nearly_planar_points():
    rng = np.random.default_rng(61)
    points = rng.normal(size=(12, 3)) * 3.0
    points[:, 2] = rng.normal(scale=0.01, size=12)
    return points


@pytest.mark.parametrize("minimizer_cls", MINIMIZERS)
@pytest.mark.parametrize("make_source", [nearly_collinear_points, nearly_planar_points])
def test_near_degenerate_points_recover_rigid_motion(minimizer_cls, make_source, caplog):
    """Test thin but three-dimensional point sets are fitted exactly."""
    source = make_source()
    rotation, target = moved(source, 62)

    with caplog.at_level(logging.WARNING):
        transform = minimizer_cls().fit(source, target)

    assert_allclose(transform.rotation, rotation, atol=1e-8)
    assert_allclose(transform.translation, [1.5, -2.0, 4.0], atol=1e-8)
    assert transform.is_proper_rotation()
    assert compute_rmsd(transform.apply(source), target) == pytest.approx(0.0, abs=1e-8)
    assert "collinear" not in caplog.text


@pytest.mark.parametrize("make_source", [nearly_collinear_points, nearly_planar_points])
def test_near_degenerate_points_are_not_rejected_in_strict_mode(make_source):
    """Test strict mode accepts thin point sets and matches the SVD fit."""
    source = make_source()
    _, target = moved(source, 63)

    eigen = KabschMinimizer(strict=True).fit(source, target)
    svd = SVDKabschMinimizer().fit(source, target)

    assert_allclose(eigen.rotation, svd.rotation, atol=1e-8)
    assert_allclose(eigen.translation, svd.translation, atol=1e-8)


def test_single_point_is_pure_translation():
    """Test a single pair gives a pure translation."""
    transform = KabschMinimizer().fit([[1.0, 2.0, 3.0]], [[4.0, 4.0, 4.0]])

    assert_allclose(transform.rotation, np.eye(3), atol=1e-12)
    assert_allclose(transform.apply([1.0, 2.0, 3.0]), [4.0, 4.0, 4.0])


def test_single_point_raises_in_strict_mode():
    """Test strict mode rejects a single pair."""
    with pytest.raises(DegenerateGeometryError):
        KabschMinimizer(strict=True).fit([[1.0, 2.0, 3.0]], [[4.0, 4.0, 4.0]])


@pytest.mark.parametrize("minimizer_cls", MINIMIZERS)
def test_minimizer_rejects_empty_bijection(minimizer_cls):
    """Test minimizers reject an empty bijection."""
    with pytest.raises(DimensionMismatchError):
        minimizer_cls().compute(AtomBijection(np.zeros((0, 3)), np.zeros((0, 3))))
