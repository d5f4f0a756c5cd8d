"""Templates for the generated Qt Creator files.

Placeholders use ``{{NAME}}`` and are filled by plain string replacement
in ``unrealqt.project.generator``. ``PRO_USER`` is a reduced Qt Creator
settings file: one target bound to the user's Unreal kit, with one build
configuration per ``BUILD_CONFIGURATION`` fragment, and a run
configuration that starts the editor on the ``.uproject``.
"""

from __future__ import annotations

PRO_HEADER: str = """\
# Generated by unrealqt for {{PROJECT_NAME}}.
# Regenerate after adding or removing source files.

TEMPLATE = aux
CONFIG -= console
CONFIG -= app_bundle
CONFIG -= qt
"""

PRO_FOOTER: str = """
include(defines.pri)
include(includes.pri)
"""

PRO_USER: str = """\
<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE QtCreatorProject>
<qtcreator>
 <data>
  <variable>EnvironmentId</variable>
  <value type="QByteArray">{{ENVIRONMENT_ID}}</value>
 </data>
 <data>
  <variable>ProjectExplorer.Project.ActiveTarget</variable>
  <value type="int">0</value>
 </data>
 <data>
  <variable>ProjectExplorer.Project.Target.0</variable>
  <valuemap type="QVariantMap">
   <value type="QString" key="ProjectExplorer.ProjectConfiguration.DefaultDisplayName">Unreal Engine</value>
   <value type="QString" key="ProjectExplorer.ProjectConfiguration.DisplayName">Unreal Engine</value>
   <value type="QString" key="ProjectExplorer.ProjectConfiguration.Id">{{CONFIGURATION_ID}}</value>
   <value type="int" key="ProjectExplorer.Target.ActiveBuildConfiguration">0</value>
   <value type="int" key="ProjectExplorer.Target.ActiveDeployConfiguration">0</value>
   <value type="int" key="ProjectExplorer.Target.ActiveRunConfiguration">0</value>
{{BUILD_CONFIGURATIONS}}   <value type="int" key="ProjectExplorer.Target.BuildConfigurationCount">{{BUILD_CONFIGURATION_COUNT}}</value>
   <valuemap type="QVariantMap" key="ProjectExplorer.Target.RunConfiguration.0">
    <value type="QString" key="ProjectExplorer.CustomExecutableRunConfiguration.Arguments">&quot;{{UPROJECT_PATH}}&quot;</value>
    <value type="QString" key="ProjectExplorer.CustomExecutableRunConfiguration.Executable">{{EDITOR_EXECUTABLE}}</value>
    <value type="QString" key="ProjectExplorer.CustomExecutableRunConfiguration.WorkingDirectory">{{PROJECT_DIR}}</value>
    <value type="QString" key="ProjectExplorer.ProjectConfiguration.DisplayName">{{PROJECT_NAME}} Editor</value>
    <value type="QString" key="ProjectExplorer.ProjectConfiguration.Id">ProjectExplorer.CustomExecutableRunConfiguration</value>
   </valuemap>
   <value type="int" key="ProjectExplorer.Target.RunConfigurationCount">1</value>
  </valuemap>
 </data>
 <data>
  <variable>ProjectExplorer.Project.TargetCount</variable>
  <value type="int">1</value>
 </data>
 <data>
  <variable>Version</variable>
  <value type="int">18</value>
 </data>
</qtcreator>
"""

BUILD_STEP_LIST: str = """\
    <valuemap type="QVariantMap" key="ProjectExplorer.BuildConfiguration.BuildStepList.{{LIST_INDEX}}">
     <valuemap type="QVariantMap" key="ProjectExplorer.BuildStepList.Step.0">
      <value type="QString" key="ProjectExplorer.ProcessStep.Arguments">{{ARGUMENTS}}</value>
      <value type="QString" key="ProjectExplorer.ProcessStep.Command">{{COMMAND}}</value>
      <value type="QString" key="ProjectExplorer.ProcessStep.WorkingDirectory">%{buildDir}</value>
      <value type="QString" key="ProjectExplorer.ProjectConfiguration.Id">ProjectExplorer.ProcessStep</value>
     </valuemap>
     <value type="int" key="ProjectExplorer.BuildStepList.StepsCount">1</value>
     <value type="QString" key="ProjectExplorer.ProjectConfiguration.Id">{{STEP_LIST_ID}}</value>
    </valuemap>
"""

BUILD_CONFIGURATION: str = """\
   <valuemap type="QVariantMap" key="ProjectExplorer.Target.BuildConfiguration.{{INDEX}}">
    <value type="QString" key="ProjectExplorer.BuildConfiguration.BuildDirectory">{{PROJECT_DIR}}</value>
{{STEP_LISTS}}    <value type="int" key="ProjectExplorer.BuildConfiguration.BuildStepListCount">2</value>
    <value type="QString" key="ProjectExplorer.ProjectConfiguration.DisplayName">{{DISPLAY_NAME}}</value>
    <value type="QString" key="ProjectExplorer.ProjectConfiguration.Id">GenericProjectManager.GenericBuildConfiguration</value>
   </valuemap>
"""
