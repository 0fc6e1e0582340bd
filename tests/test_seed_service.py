"""Tests for identicon/services/seed_service.py"""

import hashlib

import numpy as np

from identicon.services.seed_service import SeedService

ABHINAV_DIGEST = "249c7d0725f002846dc43f3d612705e5fb1e029dc0a7ee6595bf406a13ffedd2"


class TestDerive:

    def test_digest_fixture(self):
        identity = SeedService().derive("abhinavsingh")
        assert identity.digest.hex() == ABHINAV_DIGEST

    def test_seed_is_big_endian_prefix(self):
        identity = SeedService().derive("abhinavsingh")
        assert identity.seed == 0x249C7D07 == 614235399

    def test_color_fixture(self):
        identity = SeedService().derive("abhinavsingh")
        assert identity.color == (223, 31, 114, 207)

    def test_color_is_window_sum_mod_256(self):
        digest = hashlib.sha256(b"octocat").digest()
        expected = tuple(sum(digest[i:i + 8]) % 256 for i in (0, 8, 16, 24))
        assert SeedService().derive("octocat").color == expected

    def test_same_value_same_identity(self):
        assert SeedService().derive("alice") == SeedService().derive("alice")

    def test_different_values_differ(self):
        assert SeedService().derive("alice").seed != SeedService().derive("bob").seed


class TestRng:

    def test_fresh_generator_per_call(self):
        service = SeedService()
        identity = service.derive("alice")
        first = service.rng(identity)
        first.random()
        second = service.rng(identity)
        assert second.random() == np.random.default_rng(identity.seed).random()

    def test_does_not_touch_global_state(self):
        np.random.seed(1)
        expected = np.random.random()
        np.random.seed(1)
        service = SeedService()
        service.rng(service.derive("alice")).random()
        assert np.random.random() == expected


class TestFileName:

    def test_derived_from_digest(self):
        assert SeedService().file_name_for("abhinavsingh") == ABHINAV_DIGEST[:16] + ".png"

    def test_distinct_values_get_distinct_names(self):
        service = SeedService()
        assert service.file_name_for("alice") != service.file_name_for("bob")
