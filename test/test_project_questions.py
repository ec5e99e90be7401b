"""
Tests for project questions
"""
from domain.instructions import PreservedData
from domain.langgraph import DispatchFlags
from domain.langgraph.project_questions import ask_project_questions, default_deployment_target
from domain.project import DetectionResult


class TestDefaultDeploymentTarget:

    def test_platform_from_ci(self):
        detected = DetectionResult(project_name="x", ci_platforms=["GitHub Actions", "Fly.io"])

        assert default_deployment_target(detected) == "Fly.io"

    def test_docker_compose(self):
        detected = DetectionResult(project_name="x", has_docker_compose=True)

        assert default_deployment_target(detected) == "Docker / Docker Compose"

    def test_nothing_detected(self):
        assert default_deployment_target(DetectionResult(project_name="x")) is None


class TestAskProjectQuestions:

    def test_silent_mode_reuses_preserved_data(self):
        preserved = PreservedData(description="Existing", architecture_rules=("Rule",), todos=("Todo",))

        answers = ask_project_questions(DetectionResult(project_name="x"), DispatchFlags(silent=True), preserved)

        assert answers.description == "Existing"
        assert answers.deployment_target == "Unknown"
        assert answers.architecture_rules == ["Rule"]
        assert answers.todos == ["Todo"]

    def test_basic_questions(self, scripted_input):
        detected = DetectionResult(project_name="x", test_runner="Vitest")
        scripted_input(
            "Booking dashboard",  # description
            "1",                  # Vercel
            "Thin controllers",   # rule
            "",
            "Ship v2",            # todo
            "",
        )

        answers = ask_project_questions(detected, DispatchFlags())

        assert answers.description == "Booking dashboard"
        assert answers.deployment_target == "Vercel"
        assert answers.architecture_rules == ["Thin controllers"]
        assert answers.todos == ["Ship v2"]
        assert answers.want_tests is None
        assert answers.prisma_schema_command is None

    def test_existing_rules_are_kept_and_todos_are_new_only(self, scripted_input):
        detected = DetectionResult(project_name="x", test_runner="Jest")
        preserved = PreservedData(description="Old", architecture_rules=("Old rule",), todos=("Old todo",))
        scripted_input("", "", "", "")

        answers = ask_project_questions(detected, DispatchFlags(update=True), preserved)

        assert answers.description == "Old"
        assert answers.deployment_target == "Not sure yet"
        assert answers.architecture_rules == ["Old rule"]
        assert answers.todos == []

    def test_conditional_questions(self, scripted_input):
        detected = DetectionResult(
            project_name="x",
            has_prisma=True,
            has_i18n=True,
            i18n_locales=["de", "en"],
            is_monorepo=True,
            workspaces=["apps/*", "packages/*"],
        )
        scripted_input(
            "Monorepo app",  # description
            "",              # deployment default
            "",              # no rules
            "",              # prisma default command
            "2",             # default locale: en
            "3",             # all workspaces
            "n",             # no tests
            "",              # no todos
        )

        answers = ask_project_questions(detected, DispatchFlags())

        assert answers.prisma_schema_command == "npx prisma db push --accept-data-loss"
        assert answers.i18n_default_locale == "en"
        assert answers.monorepo_focus is None
        assert answers.want_tests is False

    def test_detected_default_locale_is_not_asked(self, scripted_input):
        detected = DetectionResult(
            project_name="x",
            test_runner="Vitest",
            has_i18n=True,
            i18n_locales=["de", "en"],
            i18n_default_locale="de",
            is_monorepo=True,
            workspaces=["apps/web"],
        )
        scripted_input("App", "", "", "1", "")

        answers = ask_project_questions(detected, DispatchFlags())

        assert answers.i18n_default_locale == "de"
        assert answers.monorepo_focus == "apps/web"

    def test_answers_do_not_share_preserved_lists(self, scripted_input):
        detected = DetectionResult(project_name="x", test_runner="Vitest")
        preserved = PreservedData(description="Old", architecture_rules=("Old rule",))
        scripted_input("", "", "New rule", "", "")

        answers = ask_project_questions(detected, DispatchFlags(update=True), preserved)

        assert answers.architecture_rules == ["Old rule", "New rule"]
        assert preserved.architecture_rules == ("Old rule",)
