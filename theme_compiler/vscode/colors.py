"""VS Code workbench colors derived from the semantic interface roles.

``INTERFACE_COLORS`` maps every generated color key to a derivation: either
the name of a swatch (a resolved role color) or a ``(swatch, level)`` pair,
which appends the alpha suffix for that opacity level.

Swatches are the resolved interface roles plus a few fixed values:

    text_primary, text_secondary, text_muted, text_inactive
    bg_editor, bg_sidebar, bg_activity_bar
    border (text_muted)
    accent, error, warning, success, info, modified, cursor
    bracket0 .. bracket5
    transparent (#00000000), black (#000000)
"""

import logging

from ..opacity import with_opacity

logger = logging.getLogger(__name__)

TRANSPARENT = "#00000000"

INTERFACE_COLORS = {
    # Activity Bar
    "activityBar.activeFocusBorder": "accent",
    "activityBar.activeBackground": ("accent", 35),
    "activityBar.background": "bg_activity_bar",
    "activityBar.border": "border",
    "activityBar.foreground": "text_secondary",
    "activityBar.inactiveForeground": "text_inactive",
    "activityBarBadge.background": "accent",
    "activityBarBadge.foreground": "bg_editor",
    "activityBarTop.background": "bg_activity_bar",
    "activityBarTop.foreground": "text_primary",
    "activityBarTop.inactiveForeground": "text_inactive",

    # Toolbar
    "toolbar.hoverBackground": ("text_primary", 35),
    # Badges
    "badge.background": "accent",
    "badge.foreground": "bg_editor",

    # Banner
    "banner.background": "border",
    "banner.foreground": "text_secondary",
    "banner.iconForeground": "text_secondary",

    # Breadcrumb
    "breadcrumb.activeSelectionForeground": "text_primary",
    "breadcrumb.focusForeground": "text_secondary",
    "breadcrumb.foreground": "text_muted",
    "breadcrumbPicker.background": "bg_editor",

    # Buttons
    "button.background": "bg_activity_bar",
    "button.foreground": "text_primary",
    "button.hoverBackground": ("bg_activity_bar", 50),
    "button.secondaryBackground": "bg_activity_bar",
    "button.secondaryForeground": "text_secondary",
    "button.secondaryHoverBackground": "border",
    "button.separator": "bg_editor",

    # Charts
    "charts.blue": "info",
    "charts.foreground": "text_primary",
    "charts.green": "success",
    "charts.lines": "text_inactive",
    "charts.orange": "warning",
    "charts.purple": "accent",
    "charts.red": "accent",
    "charts.yellow": "modified",

    # Chat
    "chat.avatarBackground": "bg_editor",
    "chat.avatarForeground": "accent",
    "chat.requestBubbleBackground": ("text_primary", 15),
    "chat.requestBubbleHoverBackground": ("text_primary", 35),
    "chat.requestBackground": "border",
    "chat.requestBorder": "border",
    "chat.slashCommandBackground": "transparent",
    "chat.slashCommandForeground": "accent",

    # Checkbox
    "checkbox.background": "bg_activity_bar",
    "checkbox.border": "border",
    "checkbox.foreground": "accent",

    # Command Center
    "commandCenter.activeBackground": "bg_editor",
    "commandCenter.activeForeground": "text_secondary",
    "commandCenter.background": "bg_sidebar",
    "commandCenter.border": "bg_editor",
    "commandCenter.debuggingBackground": "bg_sidebar",
    "commandCenter.foreground": "text_muted",

    # Debug Console
    "debugConsole.errorForeground": "error",
    "debugConsole.infoForeground": "info",
    "debugConsole.sourceForeground": "text_primary",
    "debugConsole.warningForeground": "warning",
    "debugConsoleInputIcon.foreground": "accent",

    # Debug Exception Widget
    "debugExceptionWidget.background": "bg_activity_bar",
    "debugExceptionWidget.border": "bg_activity_bar",

    # Debug Icons
    "debugIcon.breakpointCurrentStackframeForeground": "accent",
    "debugIcon.breakpointDisabledForeground": "text_secondary",
    "debugIcon.breakpointForeground": "accent",
    "debugIcon.breakpointStackframeForeground": "text_primary",
    "debugIcon.breakpointUnverifiedForeground": "warning",
    "debugIcon.continueForeground": "text_primary",
    "debugIcon.disconnectForeground": "text_primary",
    "debugIcon.pauseForeground": "text_primary",
    "debugIcon.restartForeground": "success",
    "debugIcon.startForeground": "success",
    "debugIcon.stepBackForeground": "text_primary",
    "debugIcon.stepIntoForeground": "text_primary",
    "debugIcon.stepOutForeground": "text_primary",
    "debugIcon.stepOverForeground": "text_primary",
    "debugIcon.stopForeground": "accent",

    # Debug Token Expression
    "debugTokenExpression.boolean": "warning",
    "debugTokenExpression.error": "accent",
    "debugTokenExpression.name": "info",
    "debugTokenExpression.number": "accent",
    "debugTokenExpression.string": "modified",
    "debugTokenExpression.value": "text_primary",

    # Debug Toolbar
    "debugToolBar.background": "border",

    # Debug View
    "debugView.exceptionLabelBackground": "accent",
    "debugView.exceptionLabelForeground": "bg_editor",
    "debugView.stateLabelBackground": "success",
    "debugView.stateLabelForeground": "bg_editor",
    "debugView.valueChangedHighlight": "accent",

    # Description Foreground
    "descriptionForeground": "text_secondary",

    # Diff Editor
    "diffEditor.diagonalFill": "border",
    "diffEditor.insertedLineBackground": ("success", 10),
    "diffEditor.insertedTextBackground": ("success", 10),
    "diffEditor.removedLineBackground": ("error", 10),
    "diffEditor.removedTextBackground": ("error", 10),
    "diffEditor.unchangedCodeBackground": "bg_sidebar",
    "diffEditor.unchangedRegionBackground": "bg_sidebar",
    "diffEditor.unchangedRegionForeground": "text_secondary",
    "diffEditor.unchangedRegionShadow": "bg_activity_bar",
    "diffEditorGutter.insertedLineBackground": "bg_editor",
    "diffEditorGutter.removedLineBackground": "bg_editor",
    "diffEditorOverview.insertedForeground": ("success", 35),
    "diffEditorOverview.removedForeground": ("error", 35),

    # Disabled Foreground
    "disabledForeground": ("text_primary", 15),

    # Dropdown
    "dropdown.background": "bg_activity_bar",
    "dropdown.border": "border",
    "dropdown.foreground": "text_muted",
    "dropdown.listBackground": "bg_activity_bar",

    # Editor
    "editor.background": "bg_editor",
    "editor.findMatchBackground": "transparent",
    "editor.findMatchBorder": "accent",
    "editor.findMatchHighlightBackground": ("text_primary", 15),
    "editor.findMatchHighlightBorder": "transparent",
    "editor.findRangeHighlightBackground": ("text_primary", 15),
    "editor.findRangeHighlightBorder": "transparent",
    "editor.focusedStackFrameHighlightBackground": ("text_secondary", 15),
    "editor.foldBackground": ("text_primary", 5),
    "editor.foreground": "text_primary",
    "editor.hoverHighlightBackground": ("text_primary", 5),
    "editor.inactiveSelectionBackground": ("text_primary", 5),
    "editor.inlineValuesBackground": "border",
    "editor.inlineValuesForeground": "text_secondary",
    "editor.lineHighlightBackground": ("text_primary", 5),
    "editor.lineHighlightBorder": "transparent",
    "editor.linkedEditingBackground": "border",
    "editor.rangeHighlightBackground": ("text_primary", 15),
    "editor.rangeHighlightBorder": "border",
    "editor.selectionBackground": ("text_secondary", 15),
    "editor.selectionHighlightBackground": ("text_primary", 15),
    "editor.selectionHighlightBorder": "transparent",
    "editor.stackFrameHighlightBackground": ("text_secondary", 15),
    "editor.wordHighlightBackground": ("text_primary", 15),
    "editor.wordHighlightBorder": "transparent",
    "editor.wordHighlightStrongBackground": ("text_primary", 15),
    "editor.wordHighlightStrongBorder": "transparent",

    # Editor Bracket Highlight
    "editorBracketHighlight.foreground1": "bracket0",
    "editorBracketHighlight.foreground2": "bracket1",
    "editorBracketHighlight.foreground3": "bracket2",
    "editorBracketHighlight.foreground4": "bracket3",
    "editorBracketHighlight.foreground5": "bracket4",
    "editorBracketHighlight.foreground6": "bracket5",

    # Editor Bracket Match
    "editorBracketMatch.background": "bg_editor",
    "editorBracketMatch.border": "text_inactive",

    # Editor Code Lens
    "editorCodeLens.foreground": "text_inactive",

    # Editor Cursor
    "editorCursor.background": "bg_editor",
    "editorCursor.foreground": "cursor",

    # Editor Error/Warning/Info
    "editorError.background": "transparent",
    "editorError.border": "transparent",
    "editorError.foreground": "error",
    "editorWarning.background": "transparent",
    "editorWarning.border": "transparent",
    "editorWarning.foreground": "warning",
    "editorInfo.background": "transparent",
    "editorInfo.border": "bg_editor",
    "editorInfo.foreground": "info",

    # Editor Ghost Text
    "editorGhostText.foreground": "text_inactive",

    # Editor Group
    "editorGroup.border": "bg_sidebar",
    "editorGroup.dropBackground": ("bg_sidebar", 75),
    "editorGroup.emptyBackground": "bg_activity_bar",
    "editorGroup.focusedEmptyBorder": "bg_sidebar",
    "editorGroupHeader.noTabsBackground": "bg_editor",
    "editorGroupHeader.tabsBackground": "bg_activity_bar",
    "editorGroupHeader.tabsBorder": "border",

    # Editor Gutter
    "editorGutter.addedBackground": ("success", 65),
    "editorGutter.background": "bg_editor",
    "editorGutter.deletedBackground": ("error", 65),
    "editorGutter.foldingControlForeground": "text_secondary",
    "editorGutter.modifiedBackground": ("warning", 65),

    # Editor Hint
    "editorHint.border": "bg_editor",
    "editorHint.foreground": "accent",

    # Editor Hover Widget
    "editorHoverWidget.background": "bg_activity_bar",
    "editorHoverWidget.border": "bg_activity_bar",

    # Editor Indent Guide
    "editorIndentGuide.background": "border",

    # Editor Inlay Hint
    "editorInlayHint.background": "bg_activity_bar",
    "editorInlayHint.foreground": "text_primary",

    # Editor Light Bulb
    "editorLightBulb.foreground": "accent",
    "editorLightBulbAi.foreground": "accent",
    "editorLightBulbAutoFix.foreground": "success",

    # Editor Line Number
    "editorLineNumber.activeForeground": ("text_secondary", 75),
    "editorLineNumber.foreground": ("text_secondary", 35),

    # Editor Link
    "editorLink.activeForeground": "info",

    # Editor Marker Navigation
    "editorMarkerNavigation.background": "border",
    "editorMarkerNavigationError.background": "error",
    "editorMarkerNavigationInfo.background": "info",
    "editorMarkerNavigationWarning.background": "warning",

    # Editor Overview Ruler
    "editorOverviewRuler.addedForeground": ("success", 65),
    "editorOverviewRuler.border": "bg_editor",
    "editorOverviewRuler.currentContentForeground": "border",
    "editorOverviewRuler.deletedForeground": ("error", 65),
    "editorOverviewRuler.errorForeground": "error",
    "editorOverviewRuler.findMatchForeground": ("text_primary", 15),
    "editorOverviewRuler.incomingContentForeground": "border",
    "editorOverviewRuler.infoForeground": "info",
    "editorOverviewRuler.modifiedForeground": ("modified", 65),
    "editorOverviewRuler.rangeHighlightForeground": ("text_primary", 15),
    "editorOverviewRuler.selectionHighlightForeground": ("text_primary", 15),
    "editorOverviewRuler.warningForeground": "warning",
    "editorOverviewRuler.wordHighlightForeground": ("text_primary", 15),
    "editorOverviewRuler.wordHighlightStrongForeground": ("text_primary", 15),

    # Editor Pane
    "editorPane.background": "bg_editor",

    # Editor Ruler
    "editorRuler.foreground": "border",

    # Editor Sticky Scroll
    "editorStickyScroll.background": "bg_editor",
    "editorStickyScroll.border": "border",
    "editorStickyScroll.shadow": "bg_editor",
    "editorStickyScrollHover.background": ("text_primary", 5),

    # Editor Suggest Widget
    "editorSuggestWidget.background": "bg_activity_bar",
    "editorSuggestWidget.border": "bg_activity_bar",
    "editorSuggestWidget.foreground": "text_secondary",
    "editorSuggestWidget.highlightForeground": "text_primary",
    "editorSuggestWidget.selectedBackground": "bg_sidebar",

    # Editor Widget
    "editorWidget.background": "bg_sidebar",
    "editorWidget.border": "border",

    # Editor Unnecessary Code
    "editorUnnecessaryCode.opacity": ("black", 65),

    # Editor Whitespace
    "editorWhitespace.foreground": "border",

    # Error Foreground
    "errorForeground": "accent",

    # Extension Badge
    "extensionBadge.remoteBackground": "success",
    "extensionBadge.remoteForeground": "text_primary",

    # Extension Button
    "extensionButton.background": "bg_activity_bar",
    "extensionButton.foreground": "text_secondary",
    "extensionButton.hoverBackground": "border",
    "extensionButton.prominentBackground": "bg_activity_bar",
    "extensionButton.prominentForeground": "text_primary",
    "extensionButton.prominentHoverBackground": "border",

    # Extension Icon
    "extensionIcon.preReleaseForeground": "accent",
    "extensionIcon.sponsorForeground": "info",
    "extensionIcon.starForeground": "accent",
    "extensionIcon.verifiedForeground": "success",

    # Focus Border
    "focusBorder": "text_inactive",

    # Foreground
    "foreground": "text_primary",

    # Git Decoration
    "gitDecoration.addedResourceForeground": ("success", 65),
    "gitDecoration.conflictingResourceForeground": "warning",
    "gitDecoration.deletedResourceForeground": ("error", 65),
    "gitDecoration.ignoredResourceForeground": "text_inactive",
    "gitDecoration.modifiedResourceForeground": ("modified", 65),
    "gitDecoration.stageDeletedResourceForeground": ("error", 65),
    "gitDecoration.stageModifiedResourceForeground": ("modified", 65),
    "gitDecoration.untrackedResourceForeground": ("success", 65),

    # Icon
    "icon.foreground": "text_primary",

    # Inline Chat
    "inlineChat.background": "bg_editor",
    "inlineChat.border": "bg_sidebar",
    "inlineChat.shadow": "bg_activity_bar",
    "inlineChatDiff.inserted": ("success", 10),
    "inlineChatDiff.removed": ("success", 10),

    # Input
    "input.background": "bg_activity_bar",
    "input.border": "border",
    "input.foreground": "text_primary",
    "input.placeholderForeground": "text_secondary",
    "inputOption.activeBackground": "border",
    "inputOption.activeBorder": "border",
    "inputOption.activeForeground": "text_primary",
    "inputOption.hoverBackground": "border",

    # Input Validation
    "inputValidation.errorBackground": "border",
    "inputValidation.errorBorder": "accent",
    "inputValidation.errorForeground": "accent",
    "inputValidation.infoBackground": "border",
    "inputValidation.infoBorder": "info",
    "inputValidation.infoForeground": "info",
    "inputValidation.warningBackground": "border",
    "inputValidation.warningBorder": "warning",
    "inputValidation.warningForeground": "warning",

    # Interactive
    "interactive.activeCodeBorder": "text_inactive",
    "interactive.inactiveCodeBorder": "border",

    # Keybinding Label
    "keybindingLabel.background": "bg_sidebar",
    "keybindingLabel.border": "bg_sidebar",
    "keybindingLabel.bottomBorder": "bg_sidebar",
    "keybindingLabel.foreground": "text_secondary",

    # List
    "list.activeSelectionBackground": ("text_primary", 5),
    "list.activeSelectionForeground": "accent",
    "list.dropBackground": ("bg_activity_bar", 75),
    "list.errorForeground": "accent",
    "list.focusBackground": "bg_editor",
    "list.focusForeground": "text_primary",
    "list.highlightForeground": "text_primary",
    "list.hoverBackground": ("text_primary", 5),
    "list.hoverForeground": "text_primary",
    "list.inactiveFocusBackground": "bg_editor",
    "list.inactiveSelectionBackground": ("accent", 10),
    "list.inactiveSelectionForeground": "accent",
    "list.invalidItemForeground": "accent",
    "list.warningForeground": "warning",

    # List Filter Widget
    "listFilterWidget.background": "bg_editor",
    "listFilterWidget.noMatchesOutline": "accent",
    "listFilterWidget.outline": "bg_editor",
    "listFilterWidget.shadow": "bg_activity_bar",

    # Menu
    "menu.background": "bg_editor",
    "menu.border": "bg_sidebar",
    "menu.foreground": "text_primary",
    "menu.selectionForeground": "accent",
    "menu.separatorBackground": "border",
    "menubar.selectionForeground": "text_primary",

    # Merge
    "merge.border": "bg_editor",
    "merge.commonContentBackground": ("text_primary", 10),
    "merge.commonHeaderBackground": ("text_primary", 15),
    "merge.currentContentBackground": ("accent", 10),
    "merge.currentHeaderBackground": ("accent", 15),
    "merge.incomingContentBackground": ("success", 10),
    "merge.incomingHeaderBackground": ("success", 15),

    # Merge Editor
    "mergeEditor.change.background": ("text_primary", 10),
    "mergeEditor.change.word.background": ("text_primary", 10),
    "mergeEditor.conflict.handled.minimapOverViewRuler": "success",
    "mergeEditor.conflict.handledFocused.border": "success",
    "mergeEditor.conflict.handledUnfocused.border": "success",
    "mergeEditor.conflict.unhandled.minimapOverViewRuler": "accent",
    "mergeEditor.conflict.unhandledFocused.border": "accent",
    "mergeEditor.conflict.unhandledUnfocused.border": "accent",

    # Minimap
    "minimap.errorHighlight": ("accent", 65),
    "minimap.findMatchHighlight": ("text_muted", 65),
    "minimap.infoHighlight": ("info", 65),
    "minimap.selectionHighlight": ("text_secondary", 15),
    "minimap.selectionOccurrenceHighlight": ("text_inactive", 65),
    "minimap.warningHighlight": ("warning", 65),
    "minimapGutter.addedBackground": "success",
    "minimapGutter.deletedBackground": ("error", 65),
    "minimapGutter.modifiedBackground": "modified",

    # Notebook
    "notebook.cellBorderColor": "border",
    "notebook.cellEditorBackground": ("bg_sidebar", 50),
    "notebook.cellInsertionIndicator": "text_primary",
    "notebook.cellStatusBarItemHoverBackground": "text_inactive",
    "notebook.cellToolbarSeparator": "border",
    "notebook.editorBackground": "bg_editor",
    "notebook.focusedEditorBorder": "text_inactive",
    "notebookStatusErrorIcon.foreground": "accent",
    "notebookStatusRunningIcon.foreground": "text_primary",
    "notebookStatusSuccessIcon.foreground": "success",

    # Notification
    "notificationCenter.border": "bg_activity_bar",
    "notificationCenterHeader.background": "bg_activity_bar",
    "notificationCenterHeader.foreground": "text_muted",
    "notificationLink.foreground": "accent",
    "notifications.background": "bg_activity_bar",
    "notifications.border": "bg_activity_bar",
    "notifications.foreground": "text_secondary",
    "notificationsErrorIcon.foreground": "accent",
    "notificationsInfoIcon.foreground": "info",
    "notificationsWarningIcon.foreground": "warning",
    "notificationToast.border": "bg_activity_bar",

    # Panel
    "panel.background": "bg_activity_bar",
    "panel.border": "bg_activity_bar",
    "panel.dropBackground": ("bg_sidebar", 75),
    "panelStickyScroll.background": "bg_activity_bar",
    "panelStickyScroll.border": "border",
    "panelStickyScroll.shadow": "bg_activity_bar",
    "panelTitle.activeBorder": "accent",
    "panelTitle.activeForeground": "accent",
    "panelTitle.inactiveForeground": "text_muted",

    # Peek View
    "peekView.border": "bg_activity_bar",
    "peekViewEditor.background": "bg_activity_bar",
    "peekViewEditor.matchHighlightBackground": "border",
    "peekViewEditorGutter.background": "bg_activity_bar",
    "peekViewResult.background": "bg_activity_bar",
    "peekViewResult.fileForeground": "text_muted",
    "peekViewResult.lineForeground": "text_muted",
    "peekViewResult.matchHighlightBackground": "border",
    "peekViewResult.selectionBackground": "border",
    "peekViewResult.selectionForeground": "text_primary",
    "peekViewTitle.background": "bg_sidebar",
    "peekViewTitleDescription.foreground": "text_muted",
    "peekViewTitleLabel.foreground": "text_primary",

    # Picker Group
    "pickerGroup.border": "bg_editor",
    "pickerGroup.foreground": "border",

    # Ports
    "ports.iconRunningProcessForeground": "success",

    # Problems
    "problemsErrorIcon.foreground": "accent",
    "problemsInfoIcon.foreground": "info",
    "problemsWarningIcon.foreground": "warning",

    # Profile Badge
    "profileBadge.background": "border",
    "profileBadge.foreground": "text_secondary",

    # Progress Bar
    "progressBar.background": "text_inactive",

    # Quick Input
    "quickInput.background": "bg_activity_bar",
    "quickInput.foreground": "text_secondary",
    "quickInputList.focusForeground": "text_primary",
    "quickInput.list.focusBackground": ("accent", 10),

    # Sash
    "sash.hoverBorder": "text_inactive",

    # SCM Graph
    "scmGraph.historyItemHoverLabelForeground": "bg_editor",
    "scmGraph.foreground1": "accent",
    "scmGraph.foreground2": "warning",
    "scmGraph.foreground3": "modified",
    "scmGraph.foreground4": "success",
    "scmGraph.foreground5": "accent",
    "scmGraph.historyItemHoverAdditionsForeground": "success",
    "scmGraph.historyItemHoverDeletionsForeground": "accent",
    "scmGraph.historyItemRefColor": "accent",
    "scmGraph.historyItemRemoteRefColor": "success",
    "scmGraph.historyItemBaseRefColor": "info",
    "scmGraph.historyItemHoverDefaultLabelForeground": "bg_editor",
    "scmGraph.historyItemHoverDefaultLabelBackground": "text_muted",

    # Scrollbar
    "scrollbar.shadow": "bg_editor",
    "scrollbarSlider.activeBackground": ("text_primary", 35),
    "scrollbarSlider.background": ("text_secondary", 15),
    "scrollbarSlider.hoverBackground": ("text_primary", 15),

    # Selection
    "selection.background": ("text_secondary", 15),

    # Settings
    "settings.checkboxBackground": "bg_activity_bar",
    "settings.checkboxBorder": "border",
    "settings.checkboxForeground": "accent",
    "settings.dropdownBackground": "bg_activity_bar",
    "settings.dropdownBorder": "border",
    "settings.dropdownForeground": "text_primary",
    "settings.dropdownListBorder": "text_muted",
    "settings.headerForeground": "accent",
    "settings.modifiedItemForeground": "accent",
    "settings.modifiedItemIndicator": "accent",
    "settings.numberInputBackground": "bg_activity_bar",
    "settings.numberInputBorder": "border",
    "settings.numberInputForeground": "text_primary",
    "settings.rowHoverBackground": ("text_inactive", 5),
    "settings.sashBorder": "border",
    "settings.settingsHeaderHoverForeground": "text_primary",
    "settings.textInputBackground": "bg_activity_bar",
    "settings.textInputBorder": "border",
    "settings.textInputForeground": "text_primary",

    # Sidebar
    "sideBar.background": "bg_sidebar",
    "sideBar.border": "bg_activity_bar",
    "sideBar.dropBackground": ("bg_sidebar", 75),
    "sideBar.foreground": "text_secondary",
    "sideBarSectionHeader.background": "bg_sidebar",
    "sideBarSectionHeader.foreground": "text_inactive",
    "sideBarStickyScroll.background": "bg_sidebar",
    "sideBarStickyScroll.border": "border",
    "sideBarStickyScroll.shadow": "bg_sidebar",
    "sideBarTitle.foreground": "text_inactive",

    # Status Bar
    "statusBar.background": "bg_activity_bar",
    "statusBar.border": "bg_activity_bar",
    "statusBar.debuggingBackground": "text_inactive",
    "statusBar.debuggingBorder": "bg_activity_bar",
    "statusBar.debuggingForeground": "text_primary",
    "statusBar.focusBorder": "border",
    "statusBar.foreground": "text_inactive",
    "statusBar.noFolderBackground": "bg_activity_bar",
    "statusBar.noFolderBorder": "bg_activity_bar",
    "statusBar.noFolderForeground": "text_inactive",
    "statusBarItem.activeBackground": "bg_editor",
    "statusBarItem.errorBackground": "bg_editor",
    "statusBarItem.errorForeground": "accent",
    "statusBarItem.focusBorder": "text_inactive",
    "statusBarItem.hoverBackground": "bg_activity_bar",
    "statusBarItem.hoverForeground": "text_primary",
    "statusBarItem.prominentBackground": "border",
    "statusBarItem.prominentHoverBackground": "border",
    "statusBarItem.remoteBackground": "bg_activity_bar",
    "statusBarItem.remoteForeground": "success",
    "statusBarItem.remoteHoverBackground": "success",
    "statusBarItem.remoteHoverForeground": "bg_editor",
    "statusBarItem.warningBackground": "bg_editor",
    "statusBarItem.warningForeground": "warning",

    # Symbol Icon
    "symbolIcon.arrayForeground": "accent",
    "symbolIcon.booleanForeground": "accent",
    "symbolIcon.classForeground": "info",
    "symbolIcon.colorForeground": "accent",
    "symbolIcon.constantForeground": "accent",
    "symbolIcon.constructorForeground": "success",
    "symbolIcon.enumeratorForeground": "warning",
    "symbolIcon.enumeratorMemberForeground": "warning",
    "symbolIcon.eventForeground": "warning",
    "symbolIcon.fieldForeground": "warning",
    "symbolIcon.fileForeground": "text_secondary",
    "symbolIcon.folderForeground": "text_secondary",
    "symbolIcon.functionForeground": "success",
    "symbolIcon.interfaceForeground": "info",
    "symbolIcon.keyForeground": "warning",
    "symbolIcon.keywordForeground": "accent",
    "symbolIcon.methodForeground": "success",
    "symbolIcon.moduleForeground": "info",
    "symbolIcon.namespaceForeground": "info",
    "symbolIcon.nullForeground": "accent",
    "symbolIcon.numberForeground": "accent",
    "symbolIcon.objectForeground": "info",
    "symbolIcon.operatorForeground": "accent",
    "symbolIcon.packageForeground": "accent",
    "symbolIcon.propertyForeground": "warning",
    "symbolIcon.referenceForeground": "accent",
    "symbolIcon.snippetForeground": "success",
    "symbolIcon.stringForeground": "modified",
    "symbolIcon.structForeground": "accent",
    "symbolIcon.textForeground": "modified",
    "symbolIcon.typeParameterForeground": "warning",
    "symbolIcon.unitForeground": "accent",
    "symbolIcon.variableForeground": "info",

    # Tab
    "tab.activeBackground": ("accent", 10),
    "tab.activeBorder": "accent",
    "tab.activeForeground": "text_primary",
    "tab.activeModifiedBorder": "border",
    "tab.border": "bg_editor",
    "tab.hoverBackground": "bg_editor",
    "tab.hoverBorder": "border",
    "tab.hoverForeground": "text_primary",
    "tab.inactiveBackground": "bg_editor",
    "tab.inactiveForeground": "text_muted",
    "tab.inactiveModifiedBorder": "border",
    "tab.lastPinnedBorder": "border",
    "tab.unfocusedActiveBorder": "text_muted",
    "tab.unfocusedActiveForeground": "text_secondary",
    "tab.unfocusedActiveModifiedBorder": "border",
    "tab.unfocusedHoverBackground": "bg_editor",
    "tab.unfocusedHoverBorder": "bg_editor",
    "tab.unfocusedHoverForeground": "text_secondary",
    "tab.unfocusedInactiveForeground": "text_muted",
    "tab.unfocusedInactiveModifiedBorder": "border",

    # Terminal
    "terminal.ansiBlack": "border",
    "terminal.ansiBlue": "warning",
    "terminal.ansiBrightBlack": "text_inactive",
    "terminal.ansiBrightBlue": "warning",
    "terminal.ansiBrightCyan": "info",
    "terminal.ansiBrightGreen": "success",
    "terminal.ansiBrightMagenta": "accent",
    "terminal.ansiBrightRed": "accent",
    "terminal.ansiBrightWhite": "text_primary",
    "terminal.ansiBrightYellow": "modified",
    "terminal.ansiCyan": "info",
    "terminal.ansiGreen": "success",
    "terminal.ansiMagenta": "accent",
    "terminal.ansiRed": "accent",
    "terminal.ansiWhite": "text_primary",
    "terminal.ansiYellow": "modified",
    "terminal.background": "bg_editor",
    "terminal.foreground": "text_primary",
    "terminal.selectionBackground": ("text_primary", 15),
    "terminalCommandDecoration.defaultBackground": "text_primary",
    "terminalCommandDecoration.errorBackground": "accent",
    "terminalCommandDecoration.successBackground": "success",
    "terminalCursor.background": "transparent",
    "terminalCursor.foreground": "cursor",

    # Testing
    "testing.iconErrored": "accent",
    "testing.iconFailed": "accent",
    "testing.iconPassed": "success",
    "testing.iconQueued": "text_primary",
    "testing.iconSkipped": "warning",
    "testing.iconUnset": "text_muted",
    "testing.message.error.decorationForeground": "accent",
    "testing.message.error.lineBackground": ("accent", 10),
    "testing.message.info.decorationForeground": "text_primary",
    "testing.message.info.lineBackground": ("text_primary", 10),
    "testing.runAction": "modified",

    # Text Block Quote
    "textBlockQuote.background": "bg_activity_bar",
    "textBlockQuote.border": "bg_activity_bar",
    "textCodeBlock.background": "bg_activity_bar",
    "textLink.activeForeground": "text_primary",
    "textLink.foreground": "accent",
    "textPreformat.foreground": "text_primary",
    "textSeparator.foreground": "text_inactive",

    # Title Bar
    "titleBar.activeBackground": "bg_activity_bar",
    "titleBar.activeForeground": "text_secondary",
    "titleBar.border": "bg_activity_bar",
    "titleBar.inactiveBackground": "bg_sidebar",
    "titleBar.inactiveForeground": "border",

    # Tree
    "tree.inactiveIndentGuidesStroke": "bg_editor",
    "tree.indentGuidesStroke": "border",

    # Walk Through
    "walkThrough.embeddedEditorBackground": "bg_sidebar",

    # Welcome Page
    "welcomePage.buttonBackground": "bg_activity_bar",
    "welcomePage.buttonHoverBackground": "border",
    "welcomePage.progress.background": "text_inactive",
    "welcomePage.progress.foreground": "text_muted",
    "welcomePage.tileBackground": "bg_activity_bar",
    "welcomePage.tileHoverBackground": "border",
    "welcomePage.tileShadow": "bg_activity_bar",

    # Widget
    "widget.shadow": "bg_activity_bar",
}


def _swatches(interface, palette):
    """Resolve the interface roles into the named colors the table refers to."""
    resolve = palette.resolve
    swatches = {
        "text_primary": resolve(interface.foreground),
        "text_secondary": resolve(interface.text_secondary),
        "text_muted": resolve(interface.text_muted),
        "text_inactive": resolve(interface.text_inactive),
        "bg_editor": resolve(interface.background_editor),
        "bg_sidebar": resolve(interface.background_sidebar),
        "bg_activity_bar": resolve(interface.background_activity_bar),
        "border": resolve(interface.text_muted),
        "accent": resolve(interface.accent),
        "error": resolve(interface.error),
        "warning": resolve(interface.warning),
        "success": resolve(interface.success),
        "info": resolve(interface.info),
        "modified": resolve(interface.modified),
        "cursor": resolve(interface.cursor),
        "transparent": TRANSPARENT,
        "black": "#000000",
    }
    for index, reference in enumerate(interface.brackets):
        swatches[f"bracket{index}"] = resolve(reference)
    return swatches


def derive_color(swatches, derivation):
    """Evaluate one table entry against the resolved swatches."""
    if isinstance(derivation, tuple):
        swatch, level = derivation
        return with_opacity(swatches[swatch], level)
    return swatches[derivation]


def build_vscode_colors(interface, palette):
    """Map the semantic interface theme to every VS Code workbench color key.

    Args:
        interface: SemanticInterfaceTheme with palette references
        palette: Palette used to resolve the references

    Returns:
        dict: Color key -> "#rrggbb" or "#rrggbbaa", in table order
    """
    swatches = _swatches(interface, palette)
    colors = {key: derive_color(swatches, derivation) for key, derivation in INTERFACE_COLORS.items()}
    logger.debug("Generated %d workbench colors", len(colors))
    return colors
