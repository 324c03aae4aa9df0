import unittest

from bury_compilation import DefaultSettings, GuardSettings, WarningSearch

from fakes import FakeSettingsSource


class TestGuardSettings(unittest.TestCase):
    def test_defaults(self):
        settings = GuardSettings(FakeSettingsSource())

        self.assertEqual(set(settings.keys()), set(DefaultSettings.keys()))
        self.assertTrue(settings["enabled"])
        self.assertTrue(settings["save_windows_on_next_start"])
        self.assertEqual(settings["warning_search"], WarningSearch.POINT)
        self.assertEqual(settings["success_message"], "Compilation successful.")
        self.assertEqual(settings["output_panel"], "exec")
        self.assertEqual(settings["build_commands"], ["build"])
        self.assertEqual(settings["poll_interval"], 100)
        self.assertEqual(settings["start_timeout"], 30)
        self.assertEqual(settings["build_timeout"], 3600)
        self.assertFalse(settings["debug"])

    def test_user_values(self):
        source = FakeSettingsSource({
            "enabled": False,
            "warning_search": "output",
            "build_commands": ["build", "exec"],
            "poll_interval": 2.5,
            "debug": True
        })
        settings = GuardSettings(source)

        self.assertFalse(settings["enabled"])
        self.assertEqual(settings["warning_search"], WarningSearch.OUTPUT)
        self.assertEqual(settings["build_commands"], ["build", "exec"])
        self.assertEqual(settings["poll_interval"], 2.5)
        self.assertTrue(settings["debug"])

    def test_wrong_types_fall_back(self):
        source = FakeSettingsSource({
            "enabled": "yes",
            "save_windows_on_next_start": 0,
            "warning_search": "everywhere",
            "output_panel": None,
            "build_commands": ["build", 3],
            "poll_interval": True,
        })
        settings = GuardSettings(source)

        self.assertTrue(settings["enabled"])
        self.assertTrue(settings["save_windows_on_next_start"])
        self.assertEqual(settings["warning_search"], WarningSearch.POINT)
        self.assertEqual(settings["output_panel"], "exec")
        self.assertEqual(settings["build_commands"], ["build"])
        self.assertEqual(settings["poll_interval"], 100)

    def test_non_positive_interval(self):
        settings = GuardSettings(FakeSettingsSource({ "poll_interval": 0 }))
        self.assertEqual(settings["poll_interval"], 100)

    def test_default_list_is_not_shared(self):
        a = GuardSettings(FakeSettingsSource())
        a["build_commands"].append("exec")
        b = GuardSettings(FakeSettingsSource())

        self.assertEqual(b["build_commands"], ["build"])

    def test_change_reloads_then_calls_back(self):
        source = FakeSettingsSource()
        seen = []
        settings = GuardSettings(source, lambda: seen.append(settings["enabled"]))

        source["enabled"] = False
        settings.handle_change()

        self.assertEqual(seen, [False])


if __name__ == "__main__":
    unittest.main()
