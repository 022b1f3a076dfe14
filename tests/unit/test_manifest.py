import unittest

from rupaul.config.exceptions import ManifestError
from rupaul.manifest.loading import load_manifest, parse_manifest
from .base import BaseDragTest, sample_manifest


class TestLoadManifest(BaseDragTest):
    """Test reading naiserator manifests from disk."""

    def test_load_full_manifest(self):
        path = self.write_manifest(sample_manifest())

        app = load_manifest(path)

        self.assertEqual(app.name, "myapp")
        self.assertEqual(app.kind, "Application")
        self.assertEqual(app.api_version, "nais.io/v1alpha1")
        self.assertEqual(app.port, 8080)
        self.assertTrue(app.vault_enabled)
        self.assertEqual([(e.name, e.value) for e in app.spec.env], [("A", "1"), ("B", "2")])
        self.assertEqual(len(app.mounts), 1)
        self.assertEqual(app.mounts[0].kv_path, "/kv/preprod/fss/myapp/default")
        self.assertEqual(app.mounts[0].mount_path, "/secrets/myapp")

    def test_scalar_env_values_become_strings(self):
        env = [{"name": "A", "value": 1}, {"name": "B", "value": 2.5}, {"name": "C", "value": True}]
        path = self.write_manifest(sample_manifest(env=env))

        app = load_manifest(path)

        self.assertEqual([e.value for e in app.spec.env], ["1", "2.5", "true"])

    def test_missing_spec_uses_defaults(self):
        path = self.write_manifest({"metadata": {"name": "bare"}})

        app = load_manifest(path)

        self.assertEqual(app.port, 0)
        self.assertEqual(app.spec.env, [])
        self.assertFalse(app.vault_enabled)
        self.assertEqual(app.mounts, [])

    def test_null_lists_are_empty(self):
        path = self.test_dir / "nais.yaml"
        path.write_text("metadata:\n  name: app\nspec:\n  env:\n  vault:\n    enabled: true\n    mounts:\n")

        app = load_manifest(path)

        self.assertEqual(app.spec.env, [])
        self.assertTrue(app.vault_enabled)
        self.assertEqual(app.mounts, [])

    def test_missing_file(self):
        with self.assertRaises(ManifestError) as cm:
            load_manifest(self.test_dir / "missing.yaml")
        self.assertIn("missing.yaml", cm.exception.guidance)

    def test_malformed_yaml(self):
        path = self.test_dir / "nais.yaml"
        path.write_text("metadata: [unclosed\n")

        with self.assertRaises(ManifestError):
            load_manifest(path)

    def test_empty_file(self):
        path = self.test_dir / "nais.yaml"
        path.write_text("")

        with self.assertRaises(ManifestError):
            load_manifest(path)

    def test_missing_name(self):
        path = self.write_manifest({"metadata": {}, "spec": {"port": 80}})

        with self.assertRaises(ManifestError):
            load_manifest(path)

    def test_non_integer_port(self):
        manifest = sample_manifest()
        manifest["spec"]["port"] = "http"
        path = self.write_manifest(manifest)

        with self.assertRaises(ManifestError):
            load_manifest(path)


class TestParseManifest(unittest.TestCase):

    def test_top_level_must_be_mapping(self):
        with self.assertRaises(ManifestError):
            parse_manifest(["not", "a", "mapping"])

    def test_unknown_keys_are_ignored(self):
        app = parse_manifest({"metadata": {"name": "x", "labels": {"team": "a"}}, "status": {}})
        self.assertEqual(app.name, "x")


if __name__ == '__main__':
    unittest.main()
