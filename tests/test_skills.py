from recruit_form.core.fields import PRESET_SKILLS
from recruit_form.core.skills import SkillSet


def test_toggle_twice_restores_contents_and_order():
    skills = SkillSet(["React", "Figma"])
    skills.toggle("Python")
    assert skills.as_list() == ["React", "Figma", "Python"]
    skills.toggle("Python")
    assert skills.as_list() == ["React", "Figma"]


def test_toggle_removes_present_skill():
    skills = SkillSet(["React", "Figma", "SEO"])
    skills.toggle("Figma")
    assert skills.as_list() == ["React", "SEO"]


def test_toggle_is_case_sensitive():
    skills = SkillSet(["React"])
    skills.toggle("react")
    assert skills.as_list() == ["React", "react"]


def test_custom_skill_is_trimmed_and_appended():
    skills = SkillSet(["Vue.js"])
    assert skills.add_custom("  Svelte  ") is True
    assert skills.as_list() == ["Vue.js", "Svelte"]


def test_custom_skill_matching_preset_is_not_duplicated():
    skills = SkillSet()
    skills.toggle("JavaScript")
    assert "JavaScript" in PRESET_SKILLS
    assert skills.add_custom(" JavaScript ") is False
    assert len(skills) == 1


def test_blank_custom_skill_is_rejected():
    skills = SkillSet()
    assert skills.add_custom("") is False
    assert skills.add_custom("   ") is False
    assert len(skills) == 0


def test_remove_skill():
    skills = SkillSet(["PHP", "Laravel"])
    assert skills.remove("PHP") is True
    assert skills.remove("PHP") is False
    assert skills.as_list() == ["Laravel"]


def test_duplicates_collapse_on_construction():
    assert SkillSet(["SEO", "SEO", "Kotlin", "SEO"]).as_list() == ["SEO", "Kotlin"]


def test_toggling_a_present_skill_twice_moves_it_to_the_end():
    skills = SkillSet(["React", "Figma"])
    skills.toggle("React")
    skills.toggle("React")
    assert skills.as_list() == ["Figma", "React"]
