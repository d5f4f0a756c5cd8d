"""Shared test data: Qt Creator settings text and fake Unreal projects."""

from __future__ import annotations

from pathlib import Path

ENV_ID = "{01234567-89ab-cdef-0123-456789abcdef}"
CONF_ID = "{fedcba98-7654-3210-fedc-ba9876543210}"

SETTINGS_TEMPLATE = """\
<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE QtCreatorProject>
<!-- Written by QtCreator 4.2.0, 2017-01-10T12:00:00. -->
<qtcreator>
 <data>
  <variable>EnvironmentId</variable>
  <value type="QByteArray">{env}</value>
 </data>
 <data>
  <variable>ProjectExplorer.Project.Target.0</variable>
  <valuemap type="QVariantMap">
   <value type="QString" key="ProjectExplorer.ProjectConfiguration.DefaultDisplayName">Unreal</value>
   <value type="QString" key="ProjectExplorer.ProjectConfiguration.Id">{conf}</value>
   <valuemap type="QVariantMap" key="ProjectExplorer.Target.BuildConfiguration.0">
    <value type="QString" key="ProjectExplorer.ProjectConfiguration.Id">Qt4ProjectManager.Qt4BuildConfiguration</value>
   </valuemap>
  </valuemap>
 </data>
</qtcreator>
"""


def settings_text(env: str = ENV_ID, conf: str = CONF_ID) -> str:
    return SETTINGS_TEMPLATE.replace("{env}", env).replace("{conf}", conf)


VCXPROJ_TEMPLATE = """\
<?xml version="1.0" encoding="utf-8"?>
<Project DefaultTargets="Build" ToolsVersion="15.0" xmlns="http://schemas.microsoft.com/developer/msbuild/2003">
  <ItemGroup Label="ProjectConfigurations">
    <ProjectConfiguration Include="Development_Editor|x64">
      <Configuration>Development_Editor</Configuration>
      <Platform>x64</Platform>
    </ProjectConfiguration>
  </ItemGroup>
  <PropertyGroup Condition="'$(Configuration)|$(Platform)'=='Development_Editor|x64'">
    <NMakeBuildCommandLine>"C:\\Program Files\\Epic Games\\UE_4.27\\Engine\\Build\\BatchFiles\\Build.bat" {name}Editor Win64 Development -Project="$(SolutionDir){name}.uproject" -WaitMutex -FromMsBuild</NMakeBuildCommandLine>
    <NMakePreprocessorDefinitions>$(NMakePreprocessorDefinitions);IS_PROGRAM=0;UE_EDITOR=1;WITH_ENGINE=1;UE_EDITOR=1</NMakePreprocessorDefinitions>
    <NMakeIncludeSearchPath>$(NMakeIncludeSearchPath);..\\..\\Source\\{name};C:\\Program Files\\Epic Games\\UE_4.27\\Engine\\Source\\Runtime\\Core\\Public</NMakeIncludeSearchPath>
  </PropertyGroup>
  <PropertyGroup Condition="'$(Configuration)|$(Platform)'=='Shipping|x64'">
    <NMakePreprocessorDefinitions>UE_BUILD_SHIPPING=1</NMakePreprocessorDefinitions>
  </PropertyGroup>
  <ItemGroup>
    <ClCompile Include="..\\..\\Source\\{name}\\{name}.cpp" />
    <ClCompile Include="..\\..\\Source\\{name}\\{name}GameModeBase.cpp" />
    <ClInclude Include="..\\..\\Source\\{name}\\{name}.h" />
    <ClInclude Include="..\\..\\Source\\{name}\\{name}GameModeBase.h" />
  </ItemGroup>
</Project>
"""


def write_unreal_project(directory: Path, name: str = "MyGame") -> Path:
    """Create a minimal Unreal project with a generated vcxproj."""
    directory.mkdir(parents=True, exist_ok=True)
    (directory / f"{name}.uproject").write_text('{"FileVersion": 3}', encoding="utf-8")
    project_files = directory / "Intermediate" / "ProjectFiles"
    project_files.mkdir(parents=True)
    (project_files / f"{name}.vcxproj").write_text(
        VCXPROJ_TEMPLATE.replace("{name}", name), encoding="utf-8"
    )
    return directory


